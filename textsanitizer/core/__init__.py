"""
Core Module
Provides the exception hierarchy shared by the package.
"""

from .exceptions import (
    SanitizerError,
    ValidationError,
    InvalidPatternError
)

__all__ = [
    # Exceptions
    'SanitizerError',
    'ValidationError',
    'InvalidPatternError',
]
