# language_filter/__init__.py

"""Configurable vocabulary filter tolerant of leetspeak obfuscation.

Flags, extracts or redacts listed words and fragments in text, with an
exception list that protects words fully containing a match.
"""

from language_filter.core.definitions import Category, ReplacementPolicy
from language_filter.core.exceptions import (
    ConfigurationError,
    EmptyContentError,
    LanguageFilterError,
    PatternError,
    UnknownContentError,
    UnknownContentFileError,
    UnknownReplacementError,
)
from language_filter.service.filter import Filter

__all__ = [
    "Category",
    "ConfigurationError",
    "EmptyContentError",
    "Filter",
    "LanguageFilterError",
    "PatternError",
    "ReplacementPolicy",
    "UnknownContentError",
    "UnknownContentFileError",
    "UnknownReplacementError",
]
