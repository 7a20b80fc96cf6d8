"""Rule engine for scoring receipts.

The rule engine applies a fixed set of independent rules to a
:class:`~receipt_points.models.schemas.Receipt` and sums the points
each one awards. Every rule sees the same receipt; none depends on the
outcome of another.

Rules:

* ``retailer_name`` – One point for every ASCII letter or digit in the
  retailer name.
* ``round_dollar_total`` – 50 points if the total, as written, ends in
  ``.00``.
* ``quarter_multiple_total`` – 25 points if the total is a multiple of
  ``0.25``. A round dollar total earns this as well.
* ``item_pairs`` – 5 points for every two items on the receipt.
* ``item_description`` – For each item whose trimmed description length
  is a multiple of 3, the price multiplied by ``0.2`` and rounded up.
* ``odd_purchase_day`` – 6 points if the day of the purchase date is odd.
* ``afternoon_purchase`` – 10 points if the purchase time is after 14:00
  and before 16:00, both ends excluded.

Amounts are read with :func:`~receipt_points.utils.helpers.parse_amount`,
which turns malformed text into zero instead of failing. A purchase
date or time that cannot be parsed aborts scoring with
:class:`InvalidDateError` or :class:`InvalidTimeError`; no partial
score is ever returned.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
import re
from typing import Callable, List, Tuple

from receipt_points.models.enums import PointsRule
from receipt_points.models.schemas import Receipt, RuleResult, ScoreResult
from receipt_points.utils.helpers import (
    parse_amount,
    parse_purchase_date,
    parse_purchase_time,
)

logger = logging.getLogger(__name__)

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]")

AFTERNOON_START = dt.time(14, 0)
AFTERNOON_END = dt.time(16, 0)


class ScoringError(ValueError):
    """Raised when a receipt cannot be scored at all."""


class InvalidDateError(ScoringError):
    def __init__(self, value: str | None = None):
        super().__init__("Invalid purchase date")
        self.value = value


class InvalidTimeError(ScoringError):
    def __init__(self, value: str | None = None):
        super().__init__("Invalid purchase time")
        self.value = value


class _ParsedReceipt:
    """Receipt plus the date and time it was validated against."""

    __slots__ = ("receipt", "purchase_date", "purchase_time")

    def __init__(self, receipt: Receipt, purchase_date: dt.date, purchase_time: dt.time):
        self.receipt = receipt
        self.purchase_date = purchase_date
        self.purchase_time = purchase_time


def _evaluate_retailer_name(parsed: _ParsedReceipt) -> Tuple[int, str]:
    count = len(_ALPHANUMERIC.findall(parsed.receipt.retailer))
    return count, f"{count} alphanumeric characters in retailer name"


def _evaluate_round_dollar_total(parsed: _ParsedReceipt) -> Tuple[int, str]:
    total = parsed.receipt.total
    if total.endswith(".00"):
        return 50, f"total {total!r} is a round dollar amount"
    return 0, f"total {total!r} has cents"


def _evaluate_quarter_multiple_total(parsed: _ParsedReceipt) -> Tuple[int, str]:
    total = parse_amount(parsed.receipt.total)
    if math.fmod(total, 0.25) == 0:
        return 25, f"total {total:.2f} is a multiple of 0.25"
    return 0, f"total {total:.2f} is not a multiple of 0.25"


def _evaluate_item_pairs(parsed: _ParsedReceipt) -> Tuple[int, str]:
    pairs = len(parsed.receipt.items) // 2
    return pairs * 5, f"{pairs} pairs of items"


def _evaluate_item_description(parsed: _ParsedReceipt) -> Tuple[int, str]:
    """Award ``ceil(price * 0.2)`` per qualifying item.

    Rounding happens per item, before summing. Contributions are floored
    at zero so a negative price cannot pull the total below zero.
    """
    points = 0
    matched: List[str] = []
    for item in parsed.receipt.items:
        description = item.short_description.strip()
        if len(description) % 3 != 0:
            continue
        price = parse_amount(item.price)
        points += max(0, math.ceil(price * 0.2))
        matched.append(description)
    return points, f"descriptions with length divisible by 3: {matched}"


def _evaluate_odd_purchase_day(parsed: _ParsedReceipt) -> Tuple[int, str]:
    day = parsed.purchase_date.day
    if day % 2 == 1:
        return 6, f"purchase day {day} is odd"
    return 0, f"purchase day {day} is even"


def _evaluate_afternoon_purchase(parsed: _ParsedReceipt) -> Tuple[int, str]:
    purchased_at = parsed.purchase_time
    if AFTERNOON_START < purchased_at < AFTERNOON_END:
        return 10, f"purchased at {purchased_at:%H:%M}, between 14:00 and 16:00"
    return 0, f"purchased at {purchased_at:%H:%M}, outside 14:00-16:00"


HANDLERS: List[Tuple[PointsRule, Callable[[_ParsedReceipt], Tuple[int, str]]]] = [
    (PointsRule.RETAILER_NAME, _evaluate_retailer_name),
    (PointsRule.ROUND_DOLLAR_TOTAL, _evaluate_round_dollar_total),
    (PointsRule.QUARTER_MULTIPLE_TOTAL, _evaluate_quarter_multiple_total),
    (PointsRule.ITEM_PAIRS, _evaluate_item_pairs),
    (PointsRule.ITEM_DESCRIPTION, _evaluate_item_description),
    (PointsRule.ODD_PURCHASE_DAY, _evaluate_odd_purchase_day),
    (PointsRule.AFTERNOON_PURCHASE, _evaluate_afternoon_purchase),
]


def _parse(receipt: Receipt) -> _ParsedReceipt:
    purchase_date = parse_purchase_date(receipt.purchase_date)
    if purchase_date is None:
        raise InvalidDateError(receipt.purchase_date)
    purchase_time = parse_purchase_time(receipt.purchase_time)
    if purchase_time is None:
        raise InvalidTimeError(receipt.purchase_time)
    return _ParsedReceipt(receipt, purchase_date, purchase_time)


def score_breakdown(receipt: Receipt) -> ScoreResult:
    """Score a receipt and report what each rule contributed.

    :param receipt: The receipt to score.
    :returns: A :class:`ScoreResult` whose ``points`` is the sum of the
        ``points`` of its ``rules``, one entry per rule in rule order.
    :raises InvalidDateError: if ``purchase_date`` is not ``YYYY-MM-DD``.
    :raises InvalidTimeError: if ``purchase_time`` is not ``HH:MM``.
    """
    parsed = _parse(receipt)
    results: List[RuleResult] = []
    for rule, handler in HANDLERS:
        points, reason = handler(parsed)
        results.append(RuleResult(rule=rule, points=points, reason=reason))
    total = sum(r.points for r in results)
    if logger.isEnabledFor(logging.DEBUG):
        for r in results:
            logger.debug("rule %s: +%d (%s)", r.rule.value, r.points, r.reason)
    return ScoreResult(points=total, rules=results)


def score(receipt: Receipt) -> int:
    """Return the total points for ``receipt``."""
    return score_breakdown(receipt).points
