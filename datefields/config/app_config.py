#!filepath: datefields/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .engine_config import EngineConfig
from .log_config import LogConfig
from datefields import logs
from datefields.utils.errors import ConfigError

# 环境变量覆盖：ENV 名 → (section, key)
ENV_OVERRIDES = {
    "DATEFIELDS_MODE": ("engine", "mode"),
    "DATEFIELDS_COERCE_DIGIT_STRINGS": ("engine", "coerce_digit_strings"),
    "DATEFIELDS_LOG_LEVEL": ("log", "level"),
    "DATEFIELDS_LOG_DIR": ("log", "dir"),
}


def package_root() -> str:
    """
    datefields/config/app_config.py → datefields/config → datefields
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig
    engine: EngineConfig

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 datefields/config/base.yml
        - .env 从当前工作目录读取（不存在则忽略）
        - DATEFIELDS_* 环境变量覆盖 YAML
        """
        # 1) 先加载 .env
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        # 4) 环境变量覆盖
        for env_name, (section, key) in ENV_OVERRIDES.items():
            env_value = os.getenv(env_name)
            if env_value is None:
                continue
            if not isinstance(raw.get(section), dict):
                raw[section] = {}
            raw[section][key] = env_value
            logs.debug(f"[Config] {section}.{key} overridden by {env_name}")

        return cls(**raw)
