# language_filter/core/definitions.py

"""Constants for list categories, replacement policies and match fences."""

from enum import Enum


class Category(str, Enum):
    """Built-in vocabulary lists shipped with the package."""

    DEFAULT = "default"
    HATE = "hate"
    PROFANITY = "profanity"
    SEX = "sex"
    VIOLENCE = "violence"


class ReplacementPolicy(str, Enum):
    """Redaction styles applied to unprotected matches."""

    STARS = "stars"
    VOWELS = "vowels"
    NONCONSONANTS = "nonconsonants"
    GARBLED = "garbled"
    DEFAULT = "default"


# A match must follow start-of-text, whitespace, "_", "-" or ".".
LEFT_FENCE = r"(?<![^\s_\-.])"

# ...and must be followed by a word boundary, whitespace, end-of-text, "_", "-" or ".".
RIGHT_FENCE = r"(?=\b|\s|\Z|_|\-|\.)"

# Shorter texts never match anything.
MIN_TEXT_LENGTH = 3

GARBLED_TOKEN = "$@!#%"
