"""Card endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, HTTPException, Request

from ghcard.config import settings
from ghcard.schemas import EventEnvelope
from ghcard.services.card import (
    EventProcessingError,
    UnsupportedEventError,
    process_event,
)

router = APIRouter(tags=["cards"])


def _render(envelope: EventEnvelope) -> dict[str, Any]:
    try:
        return process_event(envelope).to_dict()
    except UnsupportedEventError as exc:
        raise HTTPException(400, str(exc)) from exc
    except EventProcessingError as exc:
        raise HTTPException(422, str(exc)) from exc


@router.post("/card")
def render_card(envelope: EventEnvelope):
    """Render a workflow ``github`` context (event envelope) into a card."""
    return _render(envelope)


@router.post("/wh")
async def render_webhook(
    request: Request,
    x_github_event: str | None = Header(None),
):
    """
    Render a raw webhook delivery.

    The event type comes from `X-GitHub-Event`; actor, repository and ref are
    taken from the delivery body the same way a workflow run exposes them.
    """
    if not x_github_event:
        raise HTTPException(400, "Missing X-GitHub-Event header")
    try:
        payload = await request.json()
    except ValueError as exc:
        raise HTTPException(400, "Body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise HTTPException(400, "Body must be a JSON object")
    envelope = EventEnvelope.from_webhook(x_github_event, payload, settings.server_url)
    return _render(envelope)
