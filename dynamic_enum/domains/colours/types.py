"""Colour entry, colour record and the build-time colour constants."""

from pydantic import Field

from dynamic_enum.core.protocols.data_source import DataSourceRecord
from dynamic_enum.core.value_entry import ValueEntry


class ColourRecord(DataSourceRecord):
    """A colour as delivered by a data source."""

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)


class Colour(ValueEntry):
    """A registered colour. Only one instance exists per name."""

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The colour as an (r, g, b) tuple."""
        return (self.r, self.g, self.b)


RED = Colour(name="RED", r=255, g=0, b=0, sequence=0)
GREEN = Colour(name="GREEN", r=0, g=255, b=0, sequence=1)
BLUE = Colour(name="BLUE", r=0, g=0, b=255, sequence=2)

# Declaration order is registration order.
BUILTIN_COLOURS: tuple[Colour, ...] = (RED, GREEN, BLUE)
