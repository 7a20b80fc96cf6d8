from __future__ import annotations

import pytest

from receipt_points.models.enums import PointsRule
from receipt_points.models.schemas import Receipt
from receipt_points.services.rule_engine import (
    InvalidDateError,
    InvalidTimeError,
    ScoringError,
    score,
    score_breakdown,
)


def _rule_points(receipt: Receipt, rule: PointsRule) -> int:
    return next(r.points for r in score_breakdown(receipt).rules if r.rule is rule)


def test_baseline_receipt_scores_zero(make_receipt):
    assert score(make_receipt()) == 0


def test_retailer_alphanumeric_characters(make_receipt):
    assert score(make_receipt(retailer="Target")) == 6
    assert score(make_receipt(retailer="M&M Corner Market")) == 14


def test_retailer_counts_ascii_only(make_receipt):
    assert score(make_receipt(retailer="Café 7")) == 4


def test_round_dollar_total_also_counts_as_quarter_multiple(make_receipt):
    receipt = make_receipt(total="100.00")
    assert _rule_points(receipt, PointsRule.ROUND_DOLLAR_TOTAL) == 50
    assert _rule_points(receipt, PointsRule.QUARTER_MULTIPLE_TOTAL) == 25
    assert score(receipt) == 75


def test_quarter_multiple_without_round_dollar(make_receipt):
    assert score(make_receipt(total="10.75")) == 25


def test_round_dollar_rule_uses_text_suffix(make_receipt):
    # "5.0" is numerically round but does not end in ".00"
    receipt = make_receipt(total="5.0")
    assert _rule_points(receipt, PointsRule.ROUND_DOLLAR_TOTAL) == 0
    assert _rule_points(receipt, PointsRule.QUARTER_MULTIPLE_TOTAL) == 25


def test_malformed_total_parses_as_zero(make_receipt):
    # zero is a multiple of 0.25
    assert score(make_receipt(total="abc")) == 25


@pytest.mark.parametrize("count,expected", [(0, 0), (1, 0), (2, 5), (3, 5), (5, 10)])
def test_item_pairs(make_receipt, count, expected):
    items = [{"shortDescription": "ab", "price": "1.00"} for _ in range(count)]
    assert _rule_points(make_receipt(items=items), PointsRule.ITEM_PAIRS) == expected


def test_description_rule_rounds_up_per_item(make_receipt):
    items = [
        {"shortDescription": "Dasani", "price": "1.00"},
        {"shortDescription": "Dasani", "price": "1.00"},
    ]
    # ceil(0.2) + ceil(0.2), not ceil(0.4)
    assert _rule_points(make_receipt(items=items), PointsRule.ITEM_DESCRIPTION) == 2


def test_description_rule_trims_whitespace(make_receipt):
    items = [{"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"}]
    assert _rule_points(make_receipt(items=items), PointsRule.ITEM_DESCRIPTION) == 3


def test_description_rule_empty_description_qualifies(make_receipt):
    items = [{"shortDescription": "   ", "price": "10.00"}]
    assert _rule_points(make_receipt(items=items), PointsRule.ITEM_DESCRIPTION) == 2


def test_description_rule_skips_other_lengths(make_receipt):
    items = [{"shortDescription": "Pepsi - 12-oz", "price": "100.00"}]
    assert _rule_points(make_receipt(items=items), PointsRule.ITEM_DESCRIPTION) == 0


def test_description_rule_malformed_price_is_zero(make_receipt):
    items = [{"shortDescription": "abc", "price": "free"}]
    assert _rule_points(make_receipt(items=items), PointsRule.ITEM_DESCRIPTION) == 0


def test_description_rule_negative_price_never_subtracts(make_receipt):
    items = [{"shortDescription": "abc", "price": "-20.00"}]
    assert score(make_receipt(items=items)) == 0


def test_odd_purchase_day(make_receipt):
    assert score(make_receipt(purchaseDate="2022-01-01")) == 6
    assert score(make_receipt(purchaseDate="2022-01-31")) == 6
    assert score(make_receipt(purchaseDate="2022-01-30")) == 0


@pytest.mark.parametrize(
    "purchase_time,expected",
    [("13:59", 0), ("14:00", 0), ("14:01", 10), ("15:59", 10), ("16:00", 0), ("16:01", 0)],
)
def test_afternoon_window_is_exclusive(make_receipt, purchase_time, expected):
    assert score(make_receipt(purchaseTime=purchase_time)) == expected


def test_empty_items_contribute_nothing(make_receipt):
    result = score_breakdown(make_receipt(items=[]))
    by_rule = {r.rule: r.points for r in result.rules}
    assert by_rule[PointsRule.ITEM_PAIRS] == 0
    assert by_rule[PointsRule.ITEM_DESCRIPTION] == 0


def test_two_item_example(make_receipt):
    receipt = make_receipt(
        retailer="Target",
        total="35.35",
        purchaseDate="2022-01-01",
        purchaseTime="13:01",
        items=[
            {"shortDescription": "Pepsi - 12-oz", "price": "1.25"},
            {"shortDescription": "Dasani", "price": "1.00"},
        ],
    )
    # retailer 6 + pair 5 + Dasani 1 + odd day 6
    assert score(receipt) == 18


def test_target_receipt(target_receipt_payload):
    assert score(Receipt.model_validate(target_receipt_payload)) == 28


def test_corner_market_receipt(corner_market_payload):
    assert score(Receipt.model_validate(corner_market_payload)) == 109


def test_breakdown_lists_every_rule_in_order(corner_market_payload):
    result = score_breakdown(Receipt.model_validate(corner_market_payload))
    assert [r.rule for r in result.rules] == list(PointsRule)
    assert result.points == sum(r.points for r in result.rules)


@pytest.mark.parametrize("value", ["2022/01/01", "2022-13-01", "", "yesterday"])
def test_invalid_date_aborts_scoring(make_receipt, value):
    with pytest.raises(InvalidDateError, match="Invalid purchase date"):
        score(make_receipt(purchaseDate=value))


@pytest.mark.parametrize("value", ["25:00", "2:00 PM", "", "14-00"])
def test_invalid_time_aborts_scoring(make_receipt, value):
    with pytest.raises(InvalidTimeError, match="Invalid purchase time"):
        score(make_receipt(purchaseTime=value))


def test_invalid_date_reported_before_invalid_time(make_receipt):
    with pytest.raises(InvalidDateError):
        score(make_receipt(purchaseDate="bad", purchaseTime="bad"))


def test_scoring_errors_are_value_errors():
    assert issubclass(InvalidDateError, ScoringError)
    assert issubclass(InvalidTimeError, ScoringError)
    assert issubclass(ScoringError, ValueError)
