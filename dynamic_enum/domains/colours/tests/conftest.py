"""Colours domain test fixtures.

Every test starts from an unpopulated colour registry bound to a fake source
supplying BLACK, WHITE and YELLOW.
"""

import pytest

from dynamic_enum.adapters.colour_source.fake import FakeColourSource
from dynamic_enum.domains.colours import colour_registry
from dynamic_enum.domains.colours.types import ColourRecord

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

DYNAMIC_RECORDS = [
    ColourRecord(name="BLACK", r=255, g=255, b=255, sequence=3),
    ColourRecord(name="WHITE", r=0, g=0, b=0, sequence=4),
    ColourRecord(name="YELLOW", r=255, g=255, b=0, sequence=5),
]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def colour_source():
    return FakeColourSource(DYNAMIC_RECORDS)


@pytest.fixture(autouse=True)
def fresh_colour_registry(colour_source):
    """Reset the process-wide colour registry around each test."""
    colour_registry.reset()
    colour_registry.bind_data_source(colour_source)
    yield colour_registry
    colour_registry.reset()
