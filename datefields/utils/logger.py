#!filepath: datefields/utils/logger.py
import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger


class Logging:
    """
    datefields 日志模块
    ---------------------------------------
    - 默认输出到 stderr
    - 指定 log_dir 时按日期切割文件并保留
    - 包含函数级日志装饰器 catch
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.configure(log_dir, rotation, retention, log_level)

    def configure(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ) -> None:
        """设置参数并重建 sink"""
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        """
        重新配置全局 logger（会移除已有 sink）
        """
        logger.remove()

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,
                backtrace=True,
                diagnose=True,
            )
        else:
            logger.add(
                sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            )

    @classmethod
    def from_config(cls, cfg) -> "Logging":
        """按 LogConfig 构造（dir 为空字符串时只输出 stderr）"""
        return cls(
            log_dir=cfg.dir or None,
            rotation=cfg.rotation,
            retention=cfg.retention,
            log_level=cfg.level,
        )

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
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(f"[CALL] {func.__name__} args={args}, kwargs={kwargs}")

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.6f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可被 init_logging 替换）
logs = Logging()


def init_logging(cfg) -> Logging:
    """
    用 LogConfig 重新配置全局 logs，返回同一个实例。
    """
    logs.configure(
        log_dir=cfg.dir or None,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
    )
    return logs
