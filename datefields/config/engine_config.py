# datefields/config/engine_config.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from datefields.fields.catalog import Mode


class EngineConfig(BaseModel):
    mode: Mode = Mode.LOCAL
    # "1986" → 1986 when on; strict int-only otherwise
    coerce_digit_strings: bool = False
    min_bound: Optional[datetime] = None
    max_bound: Optional[datetime] = None
