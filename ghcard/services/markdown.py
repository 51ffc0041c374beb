"""Convert GitHub-flavoured markdown into the subset card markdown renders."""

from __future__ import annotations

import re

MAX_MARKDOWN_LENGTH = 800
CODE_BLOCK_PLACEHOLDER = "[代码块]"
ELLIPSIS = "\n..."

_CODE_BLOCK = re.compile(r"```[\s\S]*?```")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
# Deepest level first: "## x" must not be eaten by the "#" rule.
# Heading text stops before "\r" in CRLF bodies.
_HEADINGS = (
    re.compile(r"^###\s+([^\r\n]+)(?=\r|$)", re.MULTILINE),
    re.compile(r"^##\s+([^\r\n]+)(?=\r|$)", re.MULTILINE),
    re.compile(r"^#\s+([^\r\n]+)(?=\r|$)", re.MULTILINE),
)
_HTML_COMMENT = re.compile(r"<!--[\s\S]*?-->")
_HTML_TAG = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n{3,}")


def sanitize_markdown(text: str | None, limit: int = MAX_MARKDOWN_LENGTH) -> str:
    """
    Rewrite ``text`` so that the card markdown renderer shows it sanely.

    Steps run in a fixed order, each on the result of the previous one:
    fenced code blocks become a placeholder, inline code loses its backticks,
    images turn into links, ``#``..``###`` headings turn bold, HTML comments
    and tags are dropped, blank-line runs collapse to one, and the result is
    cut at ``limit`` characters. The ellipsis line is appended when the
    raw input is longer than ``limit``, whatever the rewrites did to its length.
    """
    out = text or ""
    out = _CODE_BLOCK.sub(CODE_BLOCK_PLACEHOLDER, out)
    out = _INLINE_CODE.sub(r"\1", out)
    out = _IMAGE.sub("\U0001f5bc\ufe0f [\\1](\\2)", out)
    for pattern in _HEADINGS:
        out = pattern.sub(r"**\1**", out)
    out = _HTML_COMMENT.sub("", out)
    out = _HTML_TAG.sub("", out)
    out = _BLANK_LINES.sub("\n\n", out)
    suffix = ELLIPSIS if len(text or "") > limit else ""
    return out[:limit] + suffix
