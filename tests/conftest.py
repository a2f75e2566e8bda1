# tests/conftest.py
from __future__ import annotations

from datetime import datetime

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    logger.enable("datekit")
    yield


@pytest.fixture
def base_time() -> datetime:
    """2000-02-01 10:00:00 (naive)"""
    return datetime(2000, 2, 1, 10, 0, 0)


@pytest.fixture
def make_config_file(tmp_path):
    """
    Factory fixture：写一个临时 YAML 配置文件

        cfg_path = make_config_file({"log": {...}})
    """
    import yaml

    def _make(data: dict, name: str = "config.yaml"):
        p = tmp_path / name
        p.write_text(yaml.safe_dump(data), encoding="utf-8")
        return p

    return _make
