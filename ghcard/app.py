"""HTTP app rendering GitHub events into chat cards."""

from __future__ import annotations

from fastapi import FastAPI

from ghcard.config import settings
from ghcard.log import configure_logging
from ghcard.routers import cards, info

configure_logging(settings.log_level)

app = FastAPI(title="GitHub → Feishu cards")

app.include_router(info.router)
app.include_router(cards.router)
