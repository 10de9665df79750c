# language_filter/core/domain.py

"""Domain models for match occurrences and filter configuration."""

from dataclasses import dataclass
from typing import Tuple

from language_filter.core.definitions import ReplacementPolicy


@dataclass(frozen=True)
class Occurrence:
    """A single boundary-respecting hit of a pattern inside a text.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
        text: Matched substring, ``text[start:end]`` of the scanned text
    """

    start: int
    end: int
    text: str

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def contains(self, start: int, end: int) -> bool:
        """Returns True if this occurrence fully covers ``[start, end)``."""
        return self.start <= start and self.end >= end


@dataclass(frozen=True)
class FilterState:
    """Immutable snapshot of a filter's configuration.

    Attributes:
        matchlist: Pattern fragments to flag, in priority order
        creative_matchlist: Obfuscation-tolerant variant of each matchlist entry
        exceptionlist: Pattern fragments whose occurrences protect matches
        replacement: Redaction style used by sanitize
        creative_letters: Whether creative_matchlist is the active list
    """

    matchlist: Tuple[str, ...]
    creative_matchlist: Tuple[str, ...]
    exceptionlist: Tuple[str, ...]
    replacement: ReplacementPolicy
    creative_letters: bool

    @property
    def active_matchlist(self) -> Tuple[str, ...]:
        return self.creative_matchlist if self.creative_letters else self.matchlist
