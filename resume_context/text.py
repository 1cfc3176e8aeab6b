"""Whitespace normalization and display sanitization for resume text."""

from __future__ import annotations

import re

_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_SPACE_AROUND_NEWLINE = re.compile(r" ?\n ?")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_HTML_TAG = re.compile(r"<[^>]+>")
_DISALLOWED_CHARS = re.compile(r"[^\w\s.,!?@#$%^&*()_+\-=\[\]{};':\"\\|<>/]")


def normalize_text(text: str) -> str:
    """Collapse whitespace while keeping paragraph breaks.

    Line endings are unified first, then runs of spaces/tabs become one
    space, spaces touching a newline are dropped, and three or more
    newlines shrink to a single blank line. The result is stripped.
    """

    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()


def sanitize_resume_text(text: str) -> str:
    """Strip script blocks, HTML tags and characters outside the allow-list."""

    text = _SCRIPT_BLOCK.sub("", text)
    text = _HTML_TAG.sub("", text)
    text = _DISALLOWED_CHARS.sub("", text)
    return text.strip()


def count_words(text: str) -> int:
    return len(text.split())


__all__ = ["normalize_text", "sanitize_resume_text", "count_words"]
