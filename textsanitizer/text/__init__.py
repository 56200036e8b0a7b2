"""
Text Module
Provides substring replacement and pattern-based character scanning.
"""

from .replacer import replace_first_occurrence, replace_last_occurrence
from .formatter import format_special_character, SPECIAL_CHARACTER_LABELS
from .matcher import (
    compile_pattern,
    find_non_matching_characters,
    find_non_matching_characters_formatted
)

__all__ = [
    # Replacer
    'replace_first_occurrence',
    'replace_last_occurrence',
    # Formatter
    'format_special_character',
    'SPECIAL_CHARACTER_LABELS',
    # Matcher
    'compile_pattern',
    'find_non_matching_characters',
    'find_non_matching_characters_formatted',
]
