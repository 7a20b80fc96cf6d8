"""Pydantic schemas for request and response models.

Pydantic models validate the data that crosses the boundary of the
API. Field names are snake_case in Python and camelCase on the wire
(``purchaseDate``, ``shortDescription``) to match the JSON contract
clients already speak.

Date, time and amount fields are deliberately plain strings: parsing
them is part of scoring and the rule engine decides what an invalid
value means, not the request validator.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import PointsRule


# ---------------------------------------------------------------------------
# Domain schemas


class Item(BaseModel):
    """Single line item on a receipt."""

    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str = Field(description="Decimal amount as text, e.g. '6.49'")


class Receipt(BaseModel):
    """Purchase receipt submitted for scoring."""

    model_config = ConfigDict(populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: str = Field(alias="purchaseTime", description="24-hour HH:MM")
    items: List[Item] = Field(default_factory=list)
    total: str = Field(description="Decimal amount as text, e.g. '35.35'")

    @field_validator("items", mode="before")
    @classmethod
    def null_items_are_empty(cls, v):
        # a receipt that lists no items is scored, not rejected
        return [] if v is None else v


class RuleResult(BaseModel):
    """Points contributed by a single rule and why."""

    rule: PointsRule
    points: int
    reason: str


class ScoreResult(BaseModel):
    """Total points for a receipt with the per-rule breakdown."""

    points: int
    rules: List[RuleResult] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API response schemas


class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
