# datefields/fields/__init__.py
from .catalog import FIELDS, FIELD_NAMES, FieldIndex, FieldSpec, Mode, decompose
from .state import EngineState, FieldState

__all__ = [
    "FIELDS", "FIELD_NAMES", "FieldIndex", "FieldSpec", "Mode", "decompose",
    "EngineState", "FieldState",
]
