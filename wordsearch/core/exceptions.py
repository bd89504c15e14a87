"""Custom exception hierarchy for the word search engine.

Search and placement never raise: a word that cannot be placed is dropped
and a word that cannot be found is ``None``. These exceptions only guard
configuration values and externally supplied input.
"""


class WordSearchError(Exception):
    """Base exception for the package."""


class ConfigurationError(WordSearchError):
    """Raised when a configuration value is out of range."""


class GridFormatError(WordSearchError):
    """Raised when grid text or rows cannot be turned into a letter grid."""


class MatchStateError(WordSearchError):
    """Raised when a match is driven through an invalid transition."""
