"""
File Name Sanitizer Module
Removes characters that are invalid in file paths and file names.
"""

from typing import Optional, FrozenSet

from textsanitizer import conf
from textsanitizer.file.models import InvalidCharacterSets


def _strip_chars(text: str, invalid_chars: FrozenSet[str]) -> str:
    """Keep only characters not present in invalid_chars, in order."""
    return ''.join(char for char in text if char not in invalid_chars)


def remove_invalid_path_characters(
    text: Optional[str],
    charsets: Optional[InvalidCharacterSets] = None
) -> Optional[str]:
    """
    Remove every character that is invalid in a file path.

    Args:
        text: The string to sanitize (None and '' are returned unchanged)
        charsets: Character tables to use (default: current platform's)

    Returns:
        str | None: A new string with invalid path characters removed
    """
    if not text:
        return text

    charsets = charsets or conf.get_default_charsets()
    return _strip_chars(text, charsets.path_chars)


def remove_invalid_file_name_characters(
    text: Optional[str],
    charsets: Optional[InvalidCharacterSets] = None
) -> Optional[str]:
    """
    Remove every character that is invalid in a file name.

    Args:
        text: The string to sanitize (None and '' are returned unchanged)
        charsets: Character tables to use (default: current platform's)

    Returns:
        str | None: A new string with invalid file name characters removed
    """
    if not text:
        return text

    charsets = charsets or conf.get_default_charsets()
    return _strip_chars(text, charsets.file_name_chars)


def remove_invalid_characters(
    text: Optional[str],
    charsets: Optional[InvalidCharacterSets] = None
) -> Optional[str]:
    """
    Remove characters invalid in either a file path or a file name.

    Path characters are stripped first, then file name characters are
    stripped from the result.

    Args:
        text: The string to sanitize (None and '' are returned unchanged)
        charsets: Character tables to use (default: current platform's)

    Returns:
        str | None: A new string safe to use as a file name

    Example:
        >>> remove_invalid_characters("a<b>:c", WINDOWS_CHARSETS)
        'abc'
    """
    if not text:
        return text

    # Resolve once so both passes see the same tables
    charsets = charsets or conf.get_default_charsets()

    text = remove_invalid_path_characters(text, charsets)
    text = remove_invalid_file_name_characters(text, charsets)

    return text
