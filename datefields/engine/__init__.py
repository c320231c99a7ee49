# datefields/engine/__init__.py
from .alignment import at_bound, at_max, at_min
from .compositor import compose
from .reconciler import (
    UpdateResult,
    coerce_int,
    field_range,
    init,
    reconcile_external,
    set_field,
    set_fields,
    to_composite,
)
from .resolver import RangeResolver
from .updater import clamp, update_field

__all__ = [
    "at_bound", "at_min", "at_max",
    "compose",
    "RangeResolver",
    "clamp", "update_field",
    "UpdateResult", "coerce_int", "init", "set_field", "set_fields",
    "reconcile_external", "to_composite", "field_range",
]
