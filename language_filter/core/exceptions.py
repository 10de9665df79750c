# language_filter/core/exceptions.py

"""Custom exception hierarchy for the language filter.

Configuration errors are raised when a list source or replacement policy is
assigned; pattern errors surface when a user-supplied fragment is first
compiled.
"""


class LanguageFilterError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(LanguageFilterError):
    """Raised when filter configuration loading or validation fails."""

    pass


class EmptyContentError(ConfigurationError):
    """Raised when a list source is a sequence with no elements."""

    pass


class UnknownContentError(ConfigurationError):
    """Raised when a list source is not a sequence, path or known category."""

    pass


class UnknownContentFileError(ConfigurationError):
    """Raised when a list source path does not exist."""

    pass


class UnknownReplacementError(ConfigurationError):
    """Raised when a replacement policy name is not recognized."""

    pass


class PatternError(LanguageFilterError):
    """Raised when a pattern fragment is not a valid regular expression."""

    pass
