"""
Pytest configuration and shared fixtures.

This module provides:
- Invalid character table fixtures for each supported platform
- Isolation from the TEXTSANITIZER_PLATFORM environment variable
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from textsanitizer.conf import PLATFORM_ENV_VAR, POSIX_CHARSETS, WINDOWS_CHARSETS
from textsanitizer.file.models import InvalidCharacterSets


@pytest.fixture(autouse=True)
def clean_platform_env(monkeypatch):
    """Make sure no test inherits a platform override from the shell."""
    monkeypatch.delenv(PLATFORM_ENV_VAR, raising=False)


@pytest.fixture
def windows_charsets() -> InvalidCharacterSets:
    """Return the Windows invalid character tables."""
    return WINDOWS_CHARSETS


@pytest.fixture
def posix_charsets() -> InvalidCharacterSets:
    """Return the POSIX invalid character tables."""
    return POSIX_CHARSETS


@pytest.fixture(params=['windows', 'posix'])
def platform_charsets(request) -> InvalidCharacterSets:
    """Run a test once per platform table."""
    return {'windows': WINDOWS_CHARSETS, 'posix': POSIX_CHARSETS}[request.param]


@pytest.fixture
def sample_text() -> str:
    """A string mixing valid text with characters rejected on Windows."""
    return "test<>:|?*string"
