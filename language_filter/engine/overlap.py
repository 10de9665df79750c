# language_filter/engine/overlap.py

"""Exception-list containment checks for candidate matches.

A candidate occurrence is protected when an exception occurrence, searched
for from the cursor onwards, begins at or before the candidate and ends at or
after it. Partial overlaps never protect.
"""

import logging
from bisect import bisect_right
from typing import Dict, List, Sequence, Tuple

from language_filter.core.domain import Occurrence
from language_filter.engine.matcher import scan

logger = logging.getLogger(__name__)


class ExceptionIndex:
    """Exception occurrences of one text, located per cursor position.

    Each cursor gets its own search, because an exception occurrence that
    overlaps an earlier one is only found when the search starts past it.
    Results are cached per cursor, so the patterns are scanned once for each
    cursor a filter pass visits instead of once per candidate.
    """

    def __init__(self, text: str, exception_patterns: Sequence[str]) -> None:
        self._text = text
        self._patterns = tuple(exception_patterns)
        self._by_cursor: Dict[int, Tuple[List[Occurrence], List[int]]] = {}

    @classmethod
    def build(cls, text: str, exception_patterns: Sequence[str]) -> "ExceptionIndex":
        """Creates an index over text for the literal exception patterns."""
        return cls(text, exception_patterns)

    def occurrences(self, search_from: int = 0) -> List[Occurrence]:
        """Returns exception occurrences found from a cursor, sorted by start."""
        return self._located(search_from)[0]

    def _located(self, search_from: int) -> Tuple[List[Occurrence], List[int]]:
        if search_from in self._by_cursor:
            return self._by_cursor[search_from]

        found: List[Occurrence] = []
        for pattern in self._patterns:
            found.extend(scan(self._text, pattern, search_from))
        found.sort(key=lambda o: (o.start, -o.end))
        entry = (found, [o.start for o in found])
        self._by_cursor[search_from] = entry

        logger.debug(
            "Exception occurrences located",
            extra={
                "search_from": search_from,
                "pattern_count": len(self._patterns),
                "occurrence_count": len(found),
            },
        )
        return entry

    def __len__(self) -> int:
        return len(self.occurrences(0))

    def is_protected(self, span: Tuple[int, int], search_from: int = 0) -> bool:
        """Checks whether an exception occurrence fully contains a span.

        Args:
            span: Half-open ``(start, end)`` of the candidate
            search_from: Cursor; exceptions are searched for from here on,
                text before it is already resolved

        Returns:
            True if the candidate is protected
        """
        start, end = span
        found, starts = self._located(search_from)
        for occurrence in found[: bisect_right(starts, start)]:
            if occurrence.contains(start, end):
                return True
        return False


def is_protected(
    candidate_span: Tuple[int, int],
    text: str,
    search_from_offset: int,
    exception_patterns: Sequence[str],
) -> bool:
    """One-shot containment check for a single candidate.

    Filters resolving many candidates over the same text should build an
    ``ExceptionIndex`` once and query it instead.
    """
    if not exception_patterns:
        return False
    index = ExceptionIndex.build(text, exception_patterns)
    return index.is_protected(candidate_span, search_from_offset)
