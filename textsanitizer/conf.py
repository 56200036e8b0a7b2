"""
Configuration Module
Holds the per-platform invalid character tables and resolves the default one.

The platform can be forced with the TEXTSANITIZER_PLATFORM environment
variable ('windows' or 'posix'); otherwise it follows os.name.
"""

import os
import logging

from textsanitizer.file.models import InvalidCharacterSets

logger = logging.getLogger(__name__)

PLATFORM_ENV_VAR = 'TEXTSANITIZER_PLATFORM'

# C0 control characters U+0001..U+001F (NUL is listed separately)
_CONTROL_CHARS = ''.join(chr(i) for i in range(1, 32))

POSIX_CHARSETS = InvalidCharacterSets(
    path_chars='\0',
    file_name_chars='\0/',
)

WINDOWS_CHARSETS = InvalidCharacterSets(
    path_chars='|\0' + _CONTROL_CHARS,
    file_name_chars='"<>|\0:*?\\/' + _CONTROL_CHARS,
)

PLATFORM_CHARSETS = {
    'posix': POSIX_CHARSETS,
    'windows': WINDOWS_CHARSETS,
}


def get_platform_name() -> str:
    """
    Resolve the platform whose character tables should be used.

    Returns:
        str: 'windows' or 'posix'

    Raises:
        ValueError: If TEXTSANITIZER_PLATFORM names an unknown platform
    """
    override = os.getenv(PLATFORM_ENV_VAR)
    if override:
        name = override.strip().lower()
        if name not in PLATFORM_CHARSETS:
            raise ValueError(
                f"Unknown {PLATFORM_ENV_VAR} value {override!r}, "
                f"expected one of: {', '.join(sorted(PLATFORM_CHARSETS))}"
            )
        return name
    return 'windows' if os.name == 'nt' else 'posix'


def get_default_charsets() -> InvalidCharacterSets:
    """Return the invalid character tables for the current platform."""
    name = get_platform_name()
    logger.debug(f"Using {name} invalid character tables")
    return PLATFORM_CHARSETS[name]
