"""
Character Matcher Module
Finds the characters of a string that fail a single-character pattern.
"""

import logging
import regex as re
from typing import List, Optional

from textsanitizer.core.exceptions import InvalidPatternError
from textsanitizer.text.formatter import format_special_character

logger = logging.getLogger(__name__)

FORMATTED_SEPARATOR = ', '


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a pattern, converting engine errors to InvalidPatternError.

    Args:
        pattern: Regular expression source

    Returns:
        regex.Pattern: The compiled pattern

    Raises:
        InvalidPatternError: If the pattern is malformed
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.debug(f"Rejected pattern {pattern!r}: {e}")
        raise InvalidPatternError(pattern, str(e)) from e


def find_non_matching_characters(text: Optional[str], pattern: Optional[str]) -> List[str]:
    """
    Find the distinct characters of text that do not match pattern.

    Each character is tested on its own, as a one-character string, with
    a regex search. Order follows the first appearance in text.

    Args:
        text: The input string to analyze
        pattern: The regex pattern each character is tested against

    Returns:
        List[str]: Distinct non-matching characters (empty if text or
        pattern is empty or None)

    Raises:
        InvalidPatternError: If pattern is malformed

    Example:
        >>> find_non_matching_characters("abc123", "[a-z]")
        ['1', '2', '3']
    """
    if not text or not pattern:
        return []

    regex = compile_pattern(pattern)
    non_matching = [char for char in text if not regex.search(char)]

    # dict preserves insertion order, so this keeps first-seen order
    return list(dict.fromkeys(non_matching))


def find_non_matching_characters_formatted(text: Optional[str], pattern: Optional[str]) -> str:
    """
    Find non-matching characters and join them into a readable list.

    Space, newline and tab are shown as [Space], [Newline] and [Tab].

    Args:
        text: The input string to analyze
        pattern: The regex pattern each character is tested against

    Returns:
        str: Comma-separated labels, e.g. "[Space], [Newline], [Tab]"
    """
    chars = find_non_matching_characters(text, pattern)
    return FORMATTED_SEPARATOR.join(format_special_character(char) for char in chars)
