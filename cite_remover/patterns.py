from __future__ import annotations

import re

# [cite_start] or [cite:...] up to the nearest closing bracket
CITE_PATTERN = re.compile(r"\[cite_start\]|\[cite:[^\]]*\]")


def has_match(text: str) -> bool:
    """Return True if the text contains any cite marker."""

    return CITE_PATTERN.search(text) is not None


def count_markers(text: str) -> int:
    return sum(1 for _ in CITE_PATTERN.finditer(text))


def strip_markers(text: str) -> str:
    """Remove every cite marker from the text in a single pass."""

    return CITE_PATTERN.sub("", text)
