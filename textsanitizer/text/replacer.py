"""
Text Replacer Module
Replaces a single occurrence of a substring using exact, case-sensitive matching.
"""

from typing import Optional


def _replace_occurrence(
    original: Optional[str],
    search: Optional[str],
    replace: Optional[str],
    first: bool
) -> Optional[str]:
    """
    Replace either the first or the last occurrence of search in original.

    Args:
        original: The full original string
        search: The substring to find
        replace: The replacement string (None deletes the match)
        first: If True, replace the first occurrence; otherwise the last

    Returns:
        str | None: The modified string, or original if nothing was replaced
    """
    if not original or not search:
        return original

    pos = original.find(search) if first else original.rfind(search)
    if pos < 0:
        return original

    return original[:pos] + (replace or '') + original[pos + len(search):]


def replace_first_occurrence(
    original: Optional[str],
    search: Optional[str],
    replace: Optional[str]
) -> Optional[str]:
    """
    Replace the first (leftmost) occurrence of a substring.

    Args:
        original: The full original string
        search: The substring to find and replace
        replace: The replacement string

    Returns:
        str | None: The string with the first occurrence replaced, if found

    Example:
        >>> replace_first_occurrence("hello world, hello!", "hello", "hi")
        'hi world, hello!'
    """
    return _replace_occurrence(original, search, replace, first=True)


def replace_last_occurrence(
    original: Optional[str],
    search: Optional[str],
    replace: Optional[str]
) -> Optional[str]:
    """
    Replace the last (rightmost) occurrence of a substring.

    Args:
        original: The full original string
        search: The substring to find and replace
        replace: The replacement string

    Returns:
        str | None: The string with the last occurrence replaced, if found

    Example:
        >>> replace_last_occurrence("hello world, hello!", "hello", "hi")
        'hello world, hi!'
    """
    return _replace_occurrence(original, search, replace, first=False)
