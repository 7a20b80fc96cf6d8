"""Enumeration types used by the receipt points API.

Each member of :class:`PointsRule` names one of the scoring rules
applied by :mod:`receipt_points.services.rule_engine`. The values show
up in per-rule breakdowns and debug logs, so keep them stable.
"""

from enum import Enum


class PointsRule(str, Enum):
    """Scoring rules, in the order the rule engine applies them."""

    RETAILER_NAME = "retailer_name"
    ROUND_DOLLAR_TOTAL = "round_dollar_total"
    QUARTER_MULTIPLE_TOTAL = "quarter_multiple_total"
    ITEM_PAIRS = "item_pairs"
    ITEM_DESCRIPTION = "item_description"
    ODD_PURCHASE_DAY = "odd_purchase_day"
    AFTERNOON_PURCHASE = "afternoon_purchase"
