"""
textsanitizer
Small text-sanitizing helpers: invalid file name character removal,
single-occurrence replacement and pattern-based character scanning.
"""

# file must be imported before conf (conf depends on file.models)
from .file import (
    InvalidCharacterSets,
    remove_invalid_path_characters,
    remove_invalid_file_name_characters,
    remove_invalid_characters
)
from .conf import (
    POSIX_CHARSETS,
    WINDOWS_CHARSETS,
    get_default_charsets
)
from .core import SanitizerError, ValidationError, InvalidPatternError
from .text import (
    replace_first_occurrence,
    replace_last_occurrence,
    format_special_character,
    find_non_matching_characters,
    find_non_matching_characters_formatted
)
from .sanitizer import StringSanitizer

__all__ = [
    # File
    'InvalidCharacterSets',
    'remove_invalid_path_characters',
    'remove_invalid_file_name_characters',
    'remove_invalid_characters',
    # Conf
    'POSIX_CHARSETS',
    'WINDOWS_CHARSETS',
    'get_default_charsets',
    # Core
    'SanitizerError',
    'ValidationError',
    'InvalidPatternError',
    # Text
    'replace_first_occurrence',
    'replace_last_occurrence',
    'format_special_character',
    'find_non_matching_characters',
    'find_non_matching_characters_formatted',
    # Sanitizer
    'StringSanitizer',
]
