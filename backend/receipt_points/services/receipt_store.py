"""In-memory store mapping receipt ids to their points.

Entries are written once and never updated or deleted; they live for
as long as the process does. Request handlers run concurrently, so
every access to the underlying dict holds a single lock.
"""

from __future__ import annotations

import threading
from typing import Dict


class ReceiptStoreError(Exception):
    """Base class for store failures."""


class DuplicateIDError(ReceiptStoreError):
    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt id {receipt_id!r} is already stored")
        self.receipt_id = receipt_id


class ReceiptNotFoundError(ReceiptStoreError, KeyError):
    def __init__(self, receipt_id: str):
        super().__init__(f"No receipt found for id {receipt_id!r}")
        self.receipt_id = receipt_id

    def __str__(self) -> str:
        return self.args[0]


class ReceiptStore:
    """Thread-safe, write-once mapping of receipt id to points."""

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Record ``points`` under ``receipt_id``.

        :raises DuplicateIDError: if ``receipt_id`` is already present.
        """
        with self._lock:
            if receipt_id in self._points:
                raise DuplicateIDError(receipt_id)
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> int:
        """Return the points stored for ``receipt_id``.

        :raises ReceiptNotFoundError: if nothing was stored under that id.
        """
        with self._lock:
            try:
                return self._points[receipt_id]
            except KeyError:
                raise ReceiptNotFoundError(receipt_id) from None

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
