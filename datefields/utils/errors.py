# datefields/utils/errors.py
from typing import Any


class InvalidFieldValue(TypeError):
    """
    Raised when a field edit carries a value that is not an integer.
    The whole batch is rejected before any field is touched.
    """

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Expected int {field}. Received {value}.")


class ConfigError(RuntimeError):
    """
    Raised for unreadable config files (bad YAML, wrong top-level type).
    Should NOT print traceback.
    """
