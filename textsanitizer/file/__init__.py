"""
File Module
Provides invalid path and file name character handling.
"""

from .models import InvalidCharacterSets, is_control_character
from .sanitizer import (
    remove_invalid_path_characters,
    remove_invalid_file_name_characters,
    remove_invalid_characters
)

__all__ = [
    # Models
    'InvalidCharacterSets',
    'is_control_character',
    # Sanitizer
    'remove_invalid_path_characters',
    'remove_invalid_file_name_characters',
    'remove_invalid_characters',
]
