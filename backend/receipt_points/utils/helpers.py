"""Parsing helpers shared by the rule engine."""

from __future__ import annotations

import datetime as dt
import math
import re
from typing import Optional

_AMOUNT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_amount(value: str | None) -> float:
    """Permissively parse a decimal amount, defaulting to zero.

    Leading whitespace is skipped and the longest leading decimal literal
    is used, so ``"12.50abc"`` parses as ``12.5``. Anything without such a
    prefix, a number followed by an exponent marker with no digits
    (``"1e"``), and infinities or NaN all parse as ``0.0``. Receipts with
    malformed amounts are still scored rather than rejected.
    """
    if not value:
        return 0.0
    match = _AMOUNT_PREFIX.match(value)
    if not match:
        return 0.0
    # "1e" or "2.5E+" is a broken exponent, not 1 or 2.5
    if value[match.end():match.end() + 1] in ("e", "E"):
        return 0.0
    try:
        amount = float(match.group(1))
    except ValueError:
        return 0.0
    return amount if math.isfinite(amount) else 0.0


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` date, returning ``None`` if it is not one.

    Unlike ``datetime.strptime`` the month and day must be zero padded.
    """
    if not value:
        return None
    match = _DATE.fullmatch(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[dt.time]:
    """Parse a 24-hour ``HH:MM`` time, returning ``None`` if it is not one.

    The hour may be one or two digits (``"9:05"``); minutes are always two.
    """
    if not value:
        return None
    match = _TIME.fullmatch(value)
    if not match:
        return None
    hour, minute = (int(part) for part in match.groups())
    try:
        return dt.time(hour, minute)
    except ValueError:
        return None
