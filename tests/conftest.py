# tests/conftest.py
from __future__ import annotations

import time
from datetime import datetime, timezone

import pytest
from loguru import logger

import datefields as df


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def min_bound() -> datetime:
    return utc(1990, 9, 30, 18, 40, 40)


@pytest.fixture
def max_bound() -> datetime:
    return utc(1996, 5, 10, 6, 20, 20)


@pytest.fixture
def bounded_state(min_bound, max_bound):
    """
    value 1993-07-20 12:30:30 UTC
    min   1990-09-30 18:40:40
    max   1996-05-10 06:20:20
    """
    return df.init(utc(1993, 7, 20, 12, 30, 30), min_bound, max_bound, mode="utc")


@pytest.fixture
def feb_2018():
    return df.init(utc(2018, 2, 10, 8, 15, 0), mode="utc")


@pytest.fixture
def local_tz(monkeypatch):
    """
    切换进程本地时区（POSIX TZ 字符串，不依赖 tzdata）
    用法：local_tz("JST-9")
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
