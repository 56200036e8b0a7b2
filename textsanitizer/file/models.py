"""
Character Set Models Module
Defines the data structure describing which characters a platform rejects.
"""

import unicodedata
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from textsanitizer.core.exceptions import ValidationError


def _to_charset(chars: Iterable[str], label: str) -> FrozenSet[str]:
    """Freeze an iterable of characters, rejecting anything longer than one char."""
    charset = frozenset(chars)
    for char in charset:
        if not isinstance(char, str) or len(char) != 1:
            raise ValidationError(
                f"{label} must contain single characters, got {char!r}"
            )
    return charset


def is_control_character(char: str) -> bool:
    """Return True for Unicode control characters (category Cc)."""
    return unicodedata.category(char) == 'Cc'


@dataclass(frozen=True)
class InvalidCharacterSets:
    """
    The pair of character sets a platform disallows in file paths and
    file names.

    Any iterable of single characters is accepted, including a plain
    string such as ``'<>|'``; both sets are stored as frozensets.
    """
    path_chars: FrozenSet[str] = field(default_factory=frozenset)
    file_name_chars: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to normalise the fields
        object.__setattr__(self, 'path_chars', _to_charset(self.path_chars, 'path_chars'))
        object.__setattr__(self, 'file_name_chars', _to_charset(self.file_name_chars, 'file_name_chars'))

    @property
    def all_chars(self) -> FrozenSet[str]:
        """Characters invalid in either a path or a file name."""
        return self.path_chars | self.file_name_chars

    def printable(self) -> 'InvalidCharacterSets':
        """
        Return a copy of these sets with control characters dropped.

        Useful when comparing behaviour across platforms, since only some
        platforms list the C0 control range as invalid.
        """
        return InvalidCharacterSets(
            path_chars=(c for c in self.path_chars if not is_control_character(c)),
            file_name_chars=(c for c in self.file_name_chars if not is_control_character(c)),
        )
