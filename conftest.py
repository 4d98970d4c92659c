"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and dynamic_enum/), so its fixtures
are available to centralized tests AND colocated domain/adapter tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables must be set before any dynamic_enum module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("COLOUR_SOURCE", "static")


# ---------------------------------------------------------------------------
# Shared fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_colour_source():
    """FakeColourSource with no records; tests fill ``.records`` as needed."""
    from dynamic_enum.adapters.colour_source.fake import FakeColourSource

    return FakeColourSource()


@pytest.fixture
def make_colour_record():
    """Factory for ColourRecord instances with sensible defaults."""
    from dynamic_enum.domains.colours.types import ColourRecord

    def _make(name: str, sequence: int, r: int = 0, g: int = 0, b: int = 0) -> ColourRecord:
        return ColourRecord(name=name, r=r, g=g, b=b, sequence=sequence)

    return _make
