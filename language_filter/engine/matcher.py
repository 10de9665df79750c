# language_filter/engine/matcher.py

"""Boundary-aware scanning of text for pattern occurrences."""

from typing import Iterator

from language_filter.core.domain import Occurrence
from language_filter.engine.compiler import compile_fenced


def scan(text: str, pattern: str, start: int = 0) -> Iterator[Occurrence]:
    """Yields non-overlapping fenced occurrences of a fragment in text.

    Matching is case-insensitive. Fences are zero-width and evaluated against
    the whole text, even when scanning begins at ``start``. Empty matches are
    discarded; after each accepted occurrence the scan resumes at its end.

    Args:
        text: Text to scan
        pattern: Uncompiled pattern fragment (literal or creative form)
        start: Offset to begin scanning from

    Yields:
        Occurrences in text order
    """
    regex = compile_fenced(pattern)
    for match in regex.finditer(text, start):
        if match.end() == match.start():
            continue
        yield Occurrence(match.start(), match.end(), match.group(0))
