# language_filter/logic/replacements.py

"""Replacement strategies used to redact matched text."""

import re
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from language_filter.core.definitions import GARBLED_TOKEN, ReplacementPolicy
from language_filter.core.exceptions import UnknownReplacementError

logger = logging.getLogger(__name__)


class ReplacementStrategy(ABC):
    """Base class for redaction styles."""

    @abstractmethod
    def replace(self, word: str) -> str:
        """Rewrites a matched substring.

        Args:
            word: Text of an unprotected match

        Returns:
            Redacted text to splice in its place
        """
        pass


class StarsReplacement(ReplacementStrategy):
    """Replaces every character with ``*``, preserving length."""

    def replace(self, word: str) -> str:
        return "*" * len(word)


class VowelsReplacement(ReplacementStrategy):
    """Stars out vowels only."""

    VOWEL = re.compile(r"[aeiou]", re.IGNORECASE)

    def replace(self, word: str) -> str:
        return self.VOWEL.sub("*", word)


class NonconsonantsReplacement(ReplacementStrategy):
    """Stars out everything that is not a consonant."""

    NON_CONSONANT = re.compile(r"[^bcdfghjklmnpqrstvwxyz]", re.IGNORECASE)

    def replace(self, word: str) -> str:
        return self.NON_CONSONANT.sub("*", word)


class GarbledReplacement(ReplacementStrategy):
    """Replaces the whole match with a fixed token."""

    def replace(self, word: str) -> str:
        return GARBLED_TOKEN


_strategies: Dict[ReplacementPolicy, ReplacementStrategy] = {}


def to_policy(value: Any) -> ReplacementPolicy:
    """Validates a replacement name.

    Args:
        value: ``ReplacementPolicy`` or one of its string values

    Returns:
        The matching ReplacementPolicy

    Raises:
        UnknownReplacementError: If value is not one of the five policies.
    """
    try:
        return ReplacementPolicy(value)
    except ValueError as e:
        allowed = ", ".join(p.value for p in ReplacementPolicy)
        error_msg = f"{value!r} is not a known replacement type. Expected one of: {allowed}"
        logger.error(error_msg)
        raise UnknownReplacementError(error_msg) from e


def get_replacement(policy: ReplacementPolicy) -> ReplacementStrategy:
    """Factory method to retrieve the strategy for a policy.

    Strategy instances are stateless and shared (Flyweight pattern).
    """
    if policy in _strategies:
        return _strategies[policy]

    lookup = {
        ReplacementPolicy.STARS: StarsReplacement,
        ReplacementPolicy.VOWELS: VowelsReplacement,
        ReplacementPolicy.NONCONSONANTS: NonconsonantsReplacement,
        ReplacementPolicy.GARBLED: GarbledReplacement,
        ReplacementPolicy.DEFAULT: GarbledReplacement,
    }

    instance = lookup[policy]()
    _strategies[policy] = instance
    return instance
