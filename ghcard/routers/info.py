"""Health check"""

from __future__ import annotations

from fastapi import APIRouter

from ghcard.services.card import supported_events

router = APIRouter(tags=["info"])


@router.get("/")
def health():
    return {"status": "ok", "events": supported_events()}
