"""Shared fixtures for gen1save tests."""

import pytest

from gen1save.buffer import SaveBuffer
from gen1save.layout import Gen1Layout


@pytest.fixture
def save():
    """Blank, correctly sized save buffer."""
    return SaveBuffer(bytes(Gen1Layout.EXPECTED_SIZE))
