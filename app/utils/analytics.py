# app/utils/analytics.py
from __future__ import annotations
from typing import Optional

import posthog
from fastapi import Request

from app.core.config import settings as cfg
from app.core.log import get_logger

log = get_logger(__name__)

# PostHog (optional)
if cfg.posthog_key:
    posthog.api_key = cfg.posthog_key
    posthog.project_api_key = cfg.posthog_key
    posthog.host = cfg.posthog_host


def track(request: Request, event: str, props: Optional[dict] = None) -> None:
    if not cfg.posthog_key:
        return
    try:
        ident = request.client.host if request.client else "0.0.0.0"
        posthog.capture(distinct_id=ident, event=event, properties=props or {})
    except Exception as exc:
        # analytics must never break a request
        log.debug("posthog capture failed for %s: %s", event, exc)
