#!filepath: datekit/utils/logger.py
from __future__ import annotations
import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional, TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from datekit.config.log_config import LogConfig


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - import 时不增删任何 sink，datekit 的日志默认 disable
    - 实例化 / configure() 后启用，只替换本实例添加的 sink
    - configure() 之后按日期切割写文件，支持保留周期
    - 包含函数级日志装饰器 catch()
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
        install: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._handler_id: Optional[int] = None
        if install:
            self._configure()

    def _configure(self) -> None:
        if self._handler_id is not None:
            try:
                logger.remove(self._handler_id)
            except ValueError:
                pass  # 已被外部 logger.remove() 清掉
        logger.enable("datekit")

        if self.log_dir is None:
            self._handler_id = logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            )
            return

        os.makedirs(self.log_dir, exist_ok=True)
        self._handler_id = logger.add(
            sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=True,
            diagnose=True,
        )
        logger.info("-----------Logger initialized-----------")

    def configure(self, cfg: "LogConfig") -> "Logging":
        """
        按 LogConfig 重新配置本实例的 sink（宿主程序的其它 sink 保留）
        """
        self.log_dir = cfg.dir if cfg.to_file else None
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level
        self._configure()
        return self

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = False,
        ignore: tuple = (),
    ) -> Callable:
        """
        ignore: 这些异常直接抛出，不记录 traceback
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(f"[CALL] {func.__name__} args={args}, kwargs={kwargs}")

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except ignore:
                    raise
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 库默认静默，由宿主程序决定是否启用
logger.disable("datekit")

# 默认全局 logs（可被 init_logging 重新配置）
logs = Logging(install=False)


def init_logging(cfg: "LogConfig") -> Logging:
    """
    应用入口（CLI）调用：清空全部 sink 后按 cfg 重新配置
    """
    logger.remove()
    logs._handler_id = None
    return logs.configure(cfg)
