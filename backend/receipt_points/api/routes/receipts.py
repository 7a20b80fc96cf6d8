"""API routes for scoring receipts and looking up their points."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from receipt_points.api.dependencies import (
    IdGenerator,
    get_id_generator,
    get_receipt_store,
)
from receipt_points.core.observability import sentry_breadcrumb
from receipt_points.models.schemas import PointsResponse, ProcessResponse, Receipt
from receipt_points.services.receipt_store import ReceiptNotFoundError, ReceiptStore
from receipt_points.services.rule_engine import ScoringError, score

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post("/process", response_model=ProcessResponse)
def process_receipt(
    receipt: Receipt,
    store: ReceiptStore = Depends(get_receipt_store),
    generate_id: IdGenerator = Depends(get_id_generator),
) -> ProcessResponse:
    """Score a receipt and store its points under a new id."""
    try:
        points = score(receipt)
    except ScoringError as e:
        logger.info("Rejected receipt from %r: %s", receipt.retailer, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    receipt_id = generate_id()
    store.put(receipt_id, points)
    logger.info("Processed receipt %s: %d points", receipt_id, points)
    sentry_breadcrumb("receipts", "receipt processed", data={"id": receipt_id, "points": points})
    return ProcessResponse(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    try:
        points = store.get(receipt_id)
    except ReceiptNotFoundError:
        logger.info("Points requested for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No receipt found for that id")
    return PointsResponse(points=points)
