"""Runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    server_url: str = os.getenv("GITHUB_SERVER_URL", "https://github.com")


settings = Settings()
