#!filepath: datekit/config/app_config.py
import yaml
from pydantic import BaseModel
from dotenv import load_dotenv
import os

from .log_config import LogConfig
from .datetime_config import DateTimeConfig
from datekit import logs


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    datekit/config/app_config.py → datekit/config → datekit → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    datetime: DateTimeConfig = DateTimeConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 datekit/config/base.yml
        - DATEKIT_LOG_LEVEL 覆盖 log.level
        """
        root = project_root()

        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(root, ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        level = os.getenv("DATEKIT_LOG_LEVEL")
        if level and isinstance(raw.get("log"), dict):
            raw["log"]["level"] = level.upper()

        logs.debug(f"[AppConfig] loaded {path}")
        return cls(**raw)
