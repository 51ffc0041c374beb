"""Envelope and card schemas"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

REF_PREFIXES = ("refs/heads/", "refs/tags/")


def _ref_name(ref: Optional[str]) -> Optional[str]:
    """'refs/heads/main' → 'main'"""
    if not ref:
        return None
    for prefix in REF_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix):]
    return ref


class EventEnvelope(BaseModel):
    """
    Repository event as handed over by a workflow run (the ``github`` context).
    Only fields used by the renderers are declared; the rest is kept as extra.
    """

    event_name: str = ""
    action: Optional[str] = None
    actor: str = ""
    server_url: str = ""
    repository: str = ""
    ref: Optional[str] = None
    ref_name: Optional[str] = None
    event: Optional[dict[str, Any]] = None

    model_config = ConfigDict(extra="allow")

    @property
    def payload(self) -> dict[str, Any]:
        return self.event or {}

    @property
    def branch(self) -> Optional[str]:
        return self.ref_name or _ref_name(self.ref)

    @classmethod
    def from_webhook(
        cls,
        event_name: str,
        payload: Mapping[str, Any] | None,
        server_url: str = "",
    ) -> "EventEnvelope":
        """Build an envelope from a raw webhook delivery body."""
        data = dict(payload) if isinstance(payload, Mapping) else {}
        sender = data.get("sender") if isinstance(data.get("sender"), Mapping) else {}
        repo = data.get("repository") if isinstance(data.get("repository"), Mapping) else {}
        ref = data.get("ref") if isinstance(data.get("ref"), str) else None
        return cls(
            event_name=event_name,
            action=data.get("action"),
            actor=sender.get("login") or "",
            server_url=server_url.rstrip("/"),
            repository=repo.get("full_name") or "",
            ref=ref,
            ref_name=_ref_name(ref),
            event=data,
        )


class PlainText(BaseModel):
    tag: str = "plain_text"
    content: str


class CardHeader(BaseModel):
    title: PlainText
    template: str = "blue"


class CardConfig(BaseModel):
    wide_screen_mode: bool = True


class MarkdownElement(BaseModel):
    tag: str = "markdown"
    content: str


class CardBody(BaseModel):
    elements: list[dict[str, Any]] = Field(default_factory=list)


class Card(BaseModel):
    """Interactive card document (schema 2.0)."""

    schema_: str = Field("2.0", alias="schema")
    config: CardConfig = Field(default_factory=CardConfig)
    header: CardHeader
    body: CardBody

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
