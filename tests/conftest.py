"""Shared pytest configuration for the trace_lib test suite.

Glyph templates and ink builders live in tests/glyphs.py so both
unittest-style classes and pytest functions can import them; the fixtures
below wrap the common ones.

Fixtures:
    glyph_l: Single vertical stroke.
    glyph_m: Stem plus two arches; arches start on the previous stroke.
    beginner_config: Beginner configuration for a 120-unit row.

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add parent directory (package) and this directory (glyphs helper) to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import glyphs


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def glyph_l():
    """Lowercase 'l' template."""
    return glyphs.glyph_l()


@pytest.fixture
def glyph_m():
    """Lowercase 'm' template."""
    return glyphs.glyph_m()


@pytest.fixture
def beginner_config():
    """Beginner configuration for the 120-unit test row."""
    return glyphs.configuration_for()
