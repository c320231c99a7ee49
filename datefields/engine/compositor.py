# datefields/engine/compositor.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from datefields.fields.catalog import Mode
from datefields.fields.state import FieldState


def compose(fields: Sequence[FieldState], mode: Mode) -> datetime:
    """
    Six field values → composite timestamp.

    UTC mode gives an aware UTC datetime, local mode a naive local one.
    Fields are trusted here; FieldUpdater already clamped them.
    """
    year, month, day, hour, minute, second = (f.value for f in fields)
    tz = timezone.utc if mode.utc else None
    return datetime(year, month + 1, day, hour, minute, second, tzinfo=tz)
