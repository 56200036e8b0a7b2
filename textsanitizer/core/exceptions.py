"""
Core Exceptions Module
Defines custom exceptions for the textsanitizer package.
"""


class SanitizerError(Exception):
    """
    Base exception for all textsanitizer errors.
    """
    pass


class ValidationError(SanitizerError, ValueError):
    """
    Exception raised when input validation fails.
    """
    pass


class InvalidPatternError(ValidationError):
    """
    Exception raised when a regular expression pattern cannot be compiled.

    The original ``regex.error`` is chained as ``__cause__``.
    """

    def __init__(self, pattern: str, message: str = None):
        """
        Initialize the InvalidPatternError.

        Args:
            pattern: The pattern string that failed to compile
            message: Error message from the regex engine
        """
        self.pattern = pattern
        self.message = message
        super().__init__(f"Invalid pattern {pattern!r}: {message}")
