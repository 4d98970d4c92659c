"""Colours domain.

Usage:
    from dynamic_enum.domains.colours import RED, value_of, values

    assert value_of("RED") is RED
    for colour in values():
        print(colour.name, colour.rgb)
"""

from dynamic_enum.domains.colours.registry import (
    ColourRef,
    bind_data_source,
    colour_registry,
    current_data_source,
    value_of,
    values,
)
from dynamic_enum.domains.colours.types import (
    BLUE,
    BUILTIN_COLOURS,
    GREEN,
    RED,
    Colour,
    ColourRecord,
)

__all__ = [
    "BLUE",
    "BUILTIN_COLOURS",
    "GREEN",
    "RED",
    "Colour",
    "ColourRecord",
    "ColourRef",
    "bind_data_source",
    "colour_registry",
    "current_data_source",
    "value_of",
    "values",
]
