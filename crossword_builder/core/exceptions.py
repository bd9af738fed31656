"""Custom exception hierarchy for crossword construction."""


class CrosswordError(Exception):
    """Base exception for crossword builder failures."""


class InputValidationError(CrosswordError):
    """Raised when the word mapping or board dimensions are malformed."""


class WordListError(CrosswordError):
    """Raised when a word list file cannot be read or parsed."""


class GenerationStateError(CrosswordError):
    """Raised when a generator instance is asked to run a second time."""


class ValidationError(CrosswordError):
    """Raised when a generated board breaks a placement invariant."""
