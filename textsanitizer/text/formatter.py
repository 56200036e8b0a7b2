"""
Special Character Formatter Module
Renders whitespace characters as readable labels.
"""

SPECIAL_CHARACTER_LABELS = {
    ' ': '[Space]',
    '\n': '[Newline]',
    '\t': '[Tab]',
}


def format_special_character(char: str) -> str:
    """Return a readable label for space, newline and tab; any other char as-is."""
    return SPECIAL_CHARACTER_LABELS.get(char, char)
