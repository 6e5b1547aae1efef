"""Exception hierarchy for the word search engine."""


class WordHunterError(Exception):
    """Base exception for engine failures."""


class InvalidArgumentError(WordHunterError, ValueError):
    """Raised when a required input is missing or a numeric parameter is out of range."""


class InvalidShapeError(WordHunterError, ValueError):
    """Raised when the board token count is not a perfect square."""


class UninitializedStateError(WordHunterError, RuntimeError):
    """Raised when a search or score is requested before a lexicon is loaded."""


class LexiconLoadError(WordHunterError):
    """Raised when the word list cannot be opened, read or decoded."""
