# language_filter/service/filter.py

"""Filter service: flags, extracts and redacts listed vocabulary."""

import logging
import threading
from dataclasses import replace
from typing import Any, Iterator, List, Optional, Tuple

from language_filter.core.definitions import MIN_TEXT_LENGTH, ReplacementPolicy
from language_filter.core.domain import FilterState, Occurrence
from language_filter.core.loader import resolve_list
from language_filter.engine.compiler import compile_creative
from language_filter.engine.matcher import scan
from language_filter.engine.overlap import ExceptionIndex
from language_filter.logic.replacements import get_replacement, to_policy
from language_filter.service.config import Settings

logger = logging.getLogger(__name__)


class Filter:
    """Vocabulary filter with exception-list protection.

    Configuration is held in an immutable ``FilterState`` snapshot. Every
    operation reads the snapshot once, and setters validate their input,
    build a new snapshot and swap it in under a lock, so concurrent readers
    never observe a half-applied change.
    """

    def __init__(
        self,
        matchlist: Any = None,
        exceptionlist: Any = None,
        replacement: Any = None,
        creative_letters: bool = False,
    ) -> None:
        """Initialize the filter.

        Args:
            matchlist: List of fragments, file path, or ``Category``;
                defaults to the built-in default category
            exceptionlist: Same shapes as matchlist; defaults to empty
            replacement: ``ReplacementPolicy`` or its name; defaults to stars
            creative_letters: Match obfuscated spellings of the matchlist

        Raises:
            ConfigurationError: If any option is invalid.
        """
        self._lock = threading.Lock()

        matchlist_items = resolve_list(matchlist)
        exceptionlist_items = resolve_list(exceptionlist, allow_empty_default=True)
        policy = to_policy(replacement if replacement is not None else ReplacementPolicy.STARS)

        self._state = FilterState(
            matchlist=matchlist_items,
            creative_matchlist=_creative(matchlist_items),
            exceptionlist=exceptionlist_items,
            replacement=policy,
            creative_letters=bool(creative_letters),
        )

        logger.info(
            "Filter initialized",
            extra={
                "matchlist_size": len(matchlist_items),
                "exceptionlist_size": len(exceptionlist_items),
                "replacement": policy.value,
                "creative_letters": self._state.creative_letters,
            },
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Filter":
        """Builds a filter from environment-backed settings."""
        return cls(
            matchlist=settings.default_category,
            exceptionlist=settings.exceptionlist_path,
            replacement=settings.replacement,
            creative_letters=settings.creative_letters,
        )

    # CONFIGURATION

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def matchlist(self) -> Tuple[str, ...]:
        return self._state.matchlist

    @matchlist.setter
    def matchlist(self, content: Any) -> None:
        items = resolve_list(content)
        creative = _creative(items)
        with self._lock:
            self._state = replace(
                self._state, matchlist=items, creative_matchlist=creative
            )
        logger.info("Matchlist updated", extra={"matchlist_size": len(items)})

    @property
    def creative_matchlist(self) -> Tuple[str, ...]:
        return self._state.creative_matchlist

    @property
    def exceptionlist(self) -> Tuple[str, ...]:
        return self._state.exceptionlist

    @exceptionlist.setter
    def exceptionlist(self, content: Any) -> None:
        items = resolve_list(content, allow_empty_default=True)
        with self._lock:
            self._state = replace(self._state, exceptionlist=items)
        logger.info("Exception list updated", extra={"exceptionlist_size": len(items)})

    @property
    def replacement(self) -> ReplacementPolicy:
        return self._state.replacement

    @replacement.setter
    def replacement(self, value: Any) -> None:
        policy = to_policy(value)
        with self._lock:
            self._state = replace(self._state, replacement=policy)
        logger.info("Replacement updated", extra={"replacement": policy.value})

    @property
    def creative_letters(self) -> bool:
        return self._state.creative_letters

    @creative_letters.setter
    def creative_letters(self, value: bool) -> None:
        with self._lock:
            self._state = replace(self._state, creative_letters=bool(value))

    # LANGUAGE

    def match(self, text: str) -> bool:
        """Returns True if text holds at least one unprotected match."""
        if _too_short(text):
            return False
        state = self._state
        exceptions = _exception_index(state, text)

        for pattern in state.active_matchlist:
            for _, protected in _resolve(text, pattern, exceptions):
                if not protected:
                    return True
        return False

    def matched(self, text: str) -> List[str]:
        """Returns the distinct unprotected matched substrings in scan order."""
        if _too_short(text):
            return []
        state = self._state
        exceptions = _exception_index(state, text)

        words: List[str] = []
        for pattern in state.active_matchlist:
            for occurrence, protected in _resolve(text, pattern, exceptions):
                if not protected:
                    words.append(occurrence.text)
        return list(dict.fromkeys(words))

    def sanitize(self, text: str) -> str:
        """Returns text with every unprotected match redacted.

        Patterns are applied in list order; each one scans the text as
        rewritten by the patterns before it.
        """
        if _too_short(text):
            return text
        state = self._state
        strategy = get_replacement(state.replacement)
        exceptions = _exception_index(state, text)
        replaced_count = 0

        for pattern in state.active_matchlist:
            pieces: List[str] = []
            last_end = 0
            for occurrence, protected in list(_resolve(text, pattern, exceptions)):
                if protected:
                    continue
                pieces.append(text[last_end : occurrence.start])
                pieces.append(strategy.replace(occurrence.text))
                last_end = occurrence.end

            if not pieces:
                continue

            pieces.append(text[last_end:])
            replaced_count += (len(pieces) - 1) // 2
            text = "".join(pieces)
            # Offsets moved; exception occurrences must be located again.
            exceptions = _exception_index(state, text)

        logger.debug(
            "Sanitize completed",
            extra={"replaced_count": replaced_count, "text_length": len(text)},
        )
        return text

    def __repr__(self):
        state = self._state
        return (
            f"<Filter "
            f"matchlist={len(state.matchlist)} "
            f"exceptionlist={len(state.exceptionlist)} "
            f"replacement={state.replacement.value} "
            f"creative_letters={state.creative_letters}>"
        )


def _creative(items: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(compile_creative(item) for item in items)


def _too_short(text: Optional[str]) -> bool:
    return not text or len(text) < MIN_TEXT_LENGTH


def _exception_index(state: FilterState, text: str) -> Optional[ExceptionIndex]:
    # Exceptions are always matched literally, even with creative letters on.
    if not state.exceptionlist:
        return None
    return ExceptionIndex.build(text, state.exceptionlist)


def _resolve(
    text: str, pattern: str, exceptions: Optional[ExceptionIndex]
) -> Iterator[Tuple[Occurrence, bool]]:
    """Yields each occurrence of pattern with its protection status.

    Without an exception index nothing is protected and no cursor is kept.
    """
    if exceptions is None:
        for occurrence in scan(text, pattern):
            yield occurrence, False
        return

    cursor = 0
    for occurrence in scan(text, pattern):
        protected = exceptions.is_protected(occurrence.span, cursor)
        cursor = occurrence.end + 1
        yield occurrence, protected
