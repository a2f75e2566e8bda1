#!filepath: datekit/utils/datetime_utils.py
from __future__ import annotations
import math
import re
from datetime import datetime, date, timezone
from email.utils import parsedate_to_datetime
from typing import Union

from datekit.utils.logger import logs


MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# "GMT+01" / "UTC-0530" / "GMT+05:30" at the end of an RFC 2822 string
_GMT_OFFSET_RE = re.compile(r"(?:GMT|UTC|UT)([+-])(\d{1,2}):?(\d{2})?\s*$", re.IGNORECASE)


def round_half_up(x: float) -> int:
    """0.5 → 1, 2.5 → 3 (内置 round() 是银行家舍入：2.5 → 2)"""
    return math.floor(x + 0.5)


class DateTimeUtils:
    UTC = timezone.utc

    # ================================================================
    # 解析：RFC 2822 / ISO 8601
    # ================================================================
    @classmethod
    def parse_rfc2822(cls, value: str) -> datetime:
        """
        RFC 2822 日期字符串 → datetime

            "Tue, 26 Jan 2016 13:48:02 GMT"      → aware (UTC)
            "December 17, 1995 03:24:00"         → naive
            "Sun, 17 May 1998 03:00:00 GMT+01"   → aware (+01:00)

        Malformed input raises whatever parsedate_to_datetime raises.
        """
        if not isinstance(value, str):
            raise TypeError(f"不支持的时间类型: {type(value)}")

        s = _GMT_OFFSET_RE.sub(cls._numeric_offset, value.strip())
        result = parsedate_to_datetime(s)
        logs.debug(f"[DateTimeUtils] rfc2822 {value!r} -> {result.isoformat()}")
        return result

    @staticmethod
    def _numeric_offset(match: re.Match) -> str:
        sign, hh, mm = match.groups()
        return f"{sign}{int(hh):02d}{int(mm or 0):02d}"

    @classmethod
    def parse_iso8601(cls, value: str) -> datetime:
        """
        ISO 8601 日期字符串 → datetime

            "2016-01-19T16:07:37+00:00"
            "2016-01-19T08:07:37Z"
        """
        if not isinstance(value, str):
            raise TypeError(f"不支持的时间类型: {type(value)}")

        result = datetime.fromisoformat(value.strip())
        logs.debug(f"[DateTimeUtils] iso8601 {value!r} -> {result.isoformat()}")
        return result

    @classmethod
    def to_utc(cls, dt_: datetime) -> datetime:
        """naive datetime is taken to already be UTC"""
        if dt_.tzinfo is None:
            return dt_.replace(tzinfo=cls.UTC)
        return dt_.astimezone(cls.UTC)

    # ================================================================
    # 闰年
    # ================================================================
    @classmethod
    def is_leap_year(cls, d: Union[date, datetime, int]) -> bool:
        year = d if isinstance(d, int) else d.year
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    # ================================================================
    # 时间差 → "HH:mm:ss.sss"
    # ================================================================
    @classmethod
    def timespan_to_string(cls, start: datetime, end: datetime, *, carry: bool = True) -> str:
        """
        Format the duration between two instants as "HH:mm:ss.sss".

        Hours are padded to two digits but never truncated ("123:00:00.000").

        carry=True rounds the difference to whole milliseconds up front, so a
        remainder of 999.5 ms or more rolls into the seconds field. carry=False
        keeps the legacy output, where that remainder rounds to 1000 and is
        rendered as ".000" with nothing carried.
        """
        dif = cls._millis_between(start, end)
        if dif < 0:
            logs.warning(f"[DateTimeUtils] timespan end < start ({dif} ms)")

        if carry:
            dif = round_half_up(dif)

        hours = math.floor(dif / MS_PER_HOUR)
        minutes = math.floor((dif - hours * MS_PER_HOUR) / MS_PER_MINUTE)
        seconds = math.floor((dif - hours * MS_PER_HOUR - minutes * MS_PER_MINUTE) / MS_PER_SECOND)
        millis = round_half_up(dif - hours * MS_PER_HOUR - minutes * MS_PER_MINUTE - seconds * MS_PER_SECOND)

        if millis >= MS_PER_SECOND:
            millis_str = "000"
        else:
            millis_str = f"{millis:03d}"

        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis_str}"

    @classmethod
    def _millis_between(cls, start: datetime, end: datetime) -> float:
        # naive - aware 直接相减会报错，统一到 UTC
        if (start.tzinfo is None) != (end.tzinfo is None):
            start, end = cls.to_utc(start), cls.to_utc(end)
        delta = end - start
        return (delta.days * 86_400 + delta.seconds) * MS_PER_SECOND + delta.microseconds / 1000

    # ================================================================
    # 时针与分针夹角（弧度）
    # ================================================================
    @classmethod
    def angle_between_clock_hands(cls, d: datetime) -> float:
        """
        Angle in radians, within [0, pi], between the hour and minute hands
        for the UTC time of ``d``. Converted to radians once, at the end.
        """
        utc = cls.to_utc(d)
        hours = utc.hour
        if hours > 12:
            hours -= 12
        minutes = utc.minute

        angle = abs(0.5 * (60 * hours + minutes) - 6 * minutes)
        if angle > 180:
            angle = 360 - angle

        return angle * (math.pi / 180)
