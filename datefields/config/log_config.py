#!filepath: datefields/config/log_config.py
from pydantic import BaseModel


class LogConfig(BaseModel):
    dir: str = ""
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"
