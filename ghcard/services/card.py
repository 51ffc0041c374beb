"""Turn an event envelope into a card document."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ghcard.schemas import Card, CardBody, CardHeader, EventEnvelope, PlainText
from ghcard.services.github import HANDLERS, CardContent, action_text

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = "blue"


class CardError(ValueError):
    """Base class for failures while building a card."""


class UnsupportedEventError(CardError):
    """Raised when no renderer exists for the event (or it produced nothing)."""

    def __init__(self, event_name: str, message: str | None = None):
        self.event_name = event_name
        super().__init__(message or f"No handler found for event: {event_name}")


class EventProcessingError(CardError):
    """Raised when a renderer fails; the original error is kept as ``__cause__``."""

    def __init__(self, event_name: str, cause: BaseException):
        self.event_name = event_name
        super().__init__(f"Error processing {event_name} event: {cause}")


def supported_events() -> list[str]:
    return sorted(HANDLERS)


def build_card(content: CardContent) -> Card:
    return Card(
        header=CardHeader(
            title=PlainText(content=content.title),
            template=HEADER_TEMPLATE,
        ),
        body=CardBody(elements=list(content.elements)),
    )


def process_event(envelope: EventEnvelope | Mapping[str, Any]) -> Card:
    """
    Render ``envelope`` with the handler registered for its ``event_name``.

    Raises
    ------
    UnsupportedEventError
        No handler for the event type, or the handler returned nothing.
    EventProcessingError
        The handler raised; the original exception is chained.
    """
    if not isinstance(envelope, EventEnvelope):
        envelope = EventEnvelope.model_validate(dict(envelope))

    event_name = envelope.event_name
    verb = action_text(envelope.action)
    handler = HANDLERS.get(event_name)
    if handler is None:
        logger.warning("No handler for event %r", event_name)
        raise UnsupportedEventError(event_name)

    logger.debug("Rendering %s event (action=%s) with %s", event_name, verb, handler.__name__)
    try:
        content = handler(envelope, verb)
    except Exception as exc:
        raise EventProcessingError(event_name, exc) from exc

    if content is None:
        raise UnsupportedEventError(
            event_name,
            f"Unsupported {event_name} event & {envelope.action} action",
        )
    return build_card(content)
