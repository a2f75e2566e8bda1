#!filepath: datekit/__init__.py
"""datekit - small date/time utilities."""

__version__ = "0.1.0"

from .utils.logger import Logging, logs, init_logging
from .utils.datetime_utils import DateTimeUtils
from .config.app_config import AppConfig

datetime_utils = DateTimeUtils

# alias 简化调用
parse_rfc2822 = DateTimeUtils.parse_rfc2822
parse_iso8601 = DateTimeUtils.parse_iso8601
is_leap_year = DateTimeUtils.is_leap_year
timespan_to_string = DateTimeUtils.timespan_to_string
angle_between_clock_hands = DateTimeUtils.angle_between_clock_hands
to_utc = DateTimeUtils.to_utc

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "DateTimeUtils", "datetime_utils",
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "timespan_to_string",
    "angle_between_clock_hands",
    "to_utc",
]
