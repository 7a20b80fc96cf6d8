"""Shared FastAPI dependencies.

The receipt store and the id generator are injected rather than
imported directly by the routes so tests can swap either one through
``app.dependency_overrides``.
"""

from __future__ import annotations

import uuid
from typing import Callable

from receipt_points.services.receipt_store import ReceiptStore

IdGenerator = Callable[[], str]

_receipt_store = ReceiptStore()


def get_receipt_store() -> ReceiptStore:
    """Return the process-wide receipt store."""
    return _receipt_store


def new_receipt_id() -> str:
    return str(uuid.uuid4())


def get_id_generator() -> IdGenerator:
    return new_receipt_id
