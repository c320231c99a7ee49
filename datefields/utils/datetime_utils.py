#!filepath: datefields/utils/datetime_utils.py
from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Union

TimestampLike = Union[datetime, int, float, str]

EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_SECOND = timedelta(seconds=1)


class DateTimeUtils:
    """
    Timestamp helpers shared by the field catalog and the engine.

    Composite timestamps are plain ``datetime`` objects:
      - utc=True  : aware, tzinfo=UTC
      - utc=False : naive local wall clock
    Naive inputs are read as wall clock in whichever mode is asked for.
    """

    # ================================================================
    # parse(): datetime / epoch seconds / string → datetime
    # ================================================================
    @classmethod
    def parse(cls, ts: TimestampLike, utc: bool = False) -> datetime:
        """
        输入可能为：
            datetime(1993, 7, 20, 12, 30, 30)
            743171430            # epoch seconds
            "1993-07-20T12:30:30"
            "1993-07-20 12:30:30"
            "19930720123030"

        返回值统一为该 mode 的表示（utc → aware UTC，local → naive 本地时间）；
        naive 输入按该 mode 的墙上时间解释。
        """
        if isinstance(ts, datetime):
            return cls.normalize(ts, utc)

        if isinstance(ts, bool):
            raise TypeError(f"不支持的时间类型: {type(ts)}")

        if isinstance(ts, (int, float)):
            if utc:
                return datetime.fromtimestamp(ts, timezone.utc)
            return datetime.fromtimestamp(ts)

        if isinstance(ts, str):
            s = ts.strip()
            try:
                return cls.normalize(datetime.fromisoformat(s), utc)
            except ValueError:
                pass

            for fmt in [
                "%Y-%m-%d %H:%M:%S.%f",
                "%Y/%m/%d %H:%M:%S.%f",
                "%Y/%m/%d %H:%M:%S",
                "%Y%m%d%H%M%S",
            ]:
                try:
                    return cls.normalize(datetime.strptime(s, fmt), utc)
                except ValueError:
                    pass

            raise ValueError(f"无法解析时间字符串: {ts}")

        raise TypeError(f"不支持的时间类型: {type(ts)}")

    @classmethod
    def normalize(cls, ts: datetime, utc: bool = False) -> datetime:
        """Naive input is wall clock in the mode; aware input keeps its instant."""
        if ts.tzinfo is None:
            return ts.replace(tzinfo=timezone.utc) if utc else ts
        return cls.to_mode(ts, utc)

    @classmethod
    def to_mode(cls, ts: datetime, utc: bool = False) -> datetime:
        """
        Same instant in the mode's representation.
        A naive value here is a stored local timestamp.
        """
        if utc:
            if ts.tzinfo is timezone.utc:
                return ts
            return ts.astimezone(timezone.utc)
        if ts.tzinfo is None:
            return ts
        return ts.astimezone().replace(tzinfo=None)

    @classmethod
    def parse_optional(
        cls, ts: Optional[TimestampLike], utc: bool = False
    ) -> Optional[datetime]:
        if ts is None:
            return None
        return cls.parse(ts, utc)

    @classmethod
    def zero(cls, utc: bool = False) -> datetime:
        """The canonical zero timestamp (epoch 0) expressed in the mode."""
        return cls.parse(0, utc)

    # ================================================================
    # calendar components
    # ================================================================
    @classmethod
    def wall_clock(cls, ts: datetime, utc: bool = False) -> datetime:
        if ts.tzinfo is None:
            return ts
        if utc:
            return ts.astimezone(timezone.utc)
        return ts.astimezone()

    @classmethod
    def components(
        cls, ts: datetime, utc: bool = False
    ) -> Tuple[int, int, int, int, int, int]:
        """(year, month0, day, hour, minute, second); month is 0-indexed."""
        w = cls.wall_clock(ts, utc)
        return w.year, w.month - 1, w.day, w.hour, w.minute, w.second

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Last valid day of a 0-indexed month."""
        return calendar.monthrange(year, month + 1)[1]

    # ================================================================
    # second-granularity equality
    # ================================================================
    @classmethod
    def epoch_second(cls, ts: datetime) -> int:
        """floor(ts / 1s) since the epoch; naive values are local time."""
        aware = ts if ts.tzinfo is not None else ts.astimezone()
        return (aware - EPOCH_UTC) // ONE_SECOND

    @classmethod
    def are_equal(cls, a: Optional[datetime], b: Optional[datetime]) -> bool:
        """
        Equal at one-second precision (floor).
        A missing value compares equal to anything.
        """
        if a is None or b is None:
            return True
        return cls.epoch_second(a) == cls.epoch_second(b)
