#!filepath: datefields/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import InvalidFieldValue, ConfigError
from .utils.datetime_utils import DateTimeUtils
from .config.app_config import AppConfig

from .fields import EngineState, FieldIndex, FieldState, Mode
from .engine import (
    UpdateResult,
    field_range,
    init,
    reconcile_external,
    set_field,
    set_fields,
    to_composite,
)
from .controller import DateInputController

__version__ = "0.1.0"

# alias 简化调用
datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging", "init_logging",
    "InvalidFieldValue", "ConfigError",
    "AppConfig",
    "datetime_utils",
    "EngineState", "FieldIndex", "FieldState", "Mode",
    "UpdateResult",
    "init", "set_field", "set_fields", "reconcile_external",
    "to_composite", "field_range",
    "DateInputController",
]
