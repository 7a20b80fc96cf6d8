"""Observability helpers (Sentry init & request scrubbing).

Keeps initialisation a no-op when no DSN is configured so local runs and
tests never talk to Sentry.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from receipt_points.core.config import settings


def _before_send(event: Dict[str, Any], hint: Dict[str, Any] | None = None):
    """Scrub headers and bodies before sending to Sentry.

    Receipts are customer purchase data, so the raw request body is
    always dropped; only method and URL are kept.
    """
    req = event.get("request") or {}
    headers = req.get("headers") or {}
    for k in list(headers.keys()):
        if k.lower() in ("authorization", "cookie", "set-cookie", "x-api-key"):
            headers.pop(k, None)
    req.pop("data", None)
    event["request"] = req
    return event


def sentry_enabled() -> bool:
    return bool(settings.SENTRY_DSN)


def init_sentry(service: str) -> bool:
    """Initialise Sentry once for a given process.

    Returns True if Sentry was initialised; False otherwise.
    """
    if not sentry_enabled():
        return False
    if getattr(init_sentry, "_done", False):  # prevent duplicate init in same process
        return True
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        integrations=[FastApiIntegration()],
        traces_sample_rate=float(settings.SENTRY_TRACES_SAMPLE_RATE or 0),
        environment=settings.ENVIRONMENT,
        release=settings.SENTRY_RELEASE,
        before_send=_before_send,
    )
    sentry_sdk.set_tag("service", service)
    init_sentry._done = True  # type: ignore[attr-defined]
    return True


def sentry_set_tags(tags: Dict[str, Any]) -> None:
    """Best-effort: set tags on the current Sentry scope (strings only)."""
    try:
        if not sentry_enabled():
            return
        for k, v in (tags or {}).items():
            sentry_sdk.set_tag(str(k), str(v)[:128] if v is not None else "")
    except Exception:
        return


def sentry_breadcrumb(
    category: str,
    message: str,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Best-effort: add a breadcrumb for important lifecycle steps."""
    try:
        if not sentry_enabled():
            return
        sentry_sdk.add_breadcrumb(
            category=category,
            message=message,
            level=level,
            data=data or {},
        )
    except Exception:
        return


def capture_exception(exc: BaseException) -> None:
    if sentry_enabled():
        sentry_sdk.capture_exception(exc)


__all__ = [
    "init_sentry",
    "sentry_enabled",
    "sentry_set_tags",
    "sentry_breadcrumb",
    "capture_exception",
]
