"""
String Sanitizer Module
Bundles all sanitizing operations behind one object bound to a set of
invalid character tables.
"""

import logging
from typing import List, Optional

from textsanitizer import conf
from textsanitizer.file.models import InvalidCharacterSets
from textsanitizer.file import sanitizer as file_sanitizer
from textsanitizer.text import matcher, replacer

logger = logging.getLogger(__name__)


class StringSanitizer:
    """
    Sanitizes and inspects strings against a fixed pair of invalid
    character sets.

    The tables are resolved once, at construction, so results do not
    change if the environment does afterwards.
    """

    def __init__(self, charsets: Optional[InvalidCharacterSets] = None):
        """
        Args:
            charsets: Invalid character tables (default: current platform's)
        """
        self.charsets = charsets or conf.get_default_charsets()
        logger.debug(
            f"StringSanitizer initialized: {len(self.charsets.path_chars)} path chars, "
            f"{len(self.charsets.file_name_chars)} file name chars"
        )

    @classmethod
    def for_platform(cls, name: str) -> 'StringSanitizer':
        """Build a sanitizer for a named platform ('windows' or 'posix')."""
        try:
            return cls(conf.PLATFORM_CHARSETS[name.lower()])
        except KeyError:
            raise ValueError(
                f"Unknown platform {name!r}, expected one of: "
                f"{', '.join(sorted(conf.PLATFORM_CHARSETS))}"
            ) from None

    def remove_invalid_path_characters(self, text: Optional[str]) -> Optional[str]:
        return file_sanitizer.remove_invalid_path_characters(text, self.charsets)

    def remove_invalid_file_name_characters(self, text: Optional[str]) -> Optional[str]:
        return file_sanitizer.remove_invalid_file_name_characters(text, self.charsets)

    def remove_invalid_characters(self, text: Optional[str]) -> Optional[str]:
        return file_sanitizer.remove_invalid_characters(text, self.charsets)

    def replace_first_occurrence(
        self,
        original: Optional[str],
        search: Optional[str],
        replace: Optional[str]
    ) -> Optional[str]:
        return replacer.replace_first_occurrence(original, search, replace)

    def replace_last_occurrence(
        self,
        original: Optional[str],
        search: Optional[str],
        replace: Optional[str]
    ) -> Optional[str]:
        return replacer.replace_last_occurrence(original, search, replace)

    def find_non_matching_characters(self, text: Optional[str], pattern: Optional[str]) -> List[str]:
        return matcher.find_non_matching_characters(text, pattern)

    def find_non_matching_characters_formatted(self, text: Optional[str], pattern: Optional[str]) -> str:
        return matcher.find_non_matching_characters_formatted(text, pattern)
