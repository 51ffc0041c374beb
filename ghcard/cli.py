"""Read an event envelope as JSON, print the card as JSON."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from pydantic import ValidationError

from ghcard.config import settings
from ghcard.log import configure_logging
from ghcard.services.card import CardError, process_event

logger = logging.getLogger(__name__)


def _read_source(argv: Sequence[str], stdin: TextIO) -> str:
    if argv:
        return Path(argv[0]).read_text(encoding="utf-8")
    return stdin.read()


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Entry point of ``gh-feishu-card``.

    Usage
    -----
    gh-feishu-card [EVENT_JSON_FILE] < event.json

    Returns 0 after printing the card, 1 on any failure (nothing on stdout).
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    configure_logging(settings.log_level)

    try:
        raw = _read_source(argv, stdin)
        data = json.loads(raw.strip() or "{}")
        if not isinstance(data, dict):
            raise CardError("Event payload must be a JSON object")
        card = process_event(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, CardError) as exc:
        logger.error("Failed to build card: %s", exc)
        print(str(exc), file=stderr)
        return 1

    stdout.write(json.dumps(card.to_dict(), ensure_ascii=False, separators=(",", ":")))
    stdout.write("\n")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
