"""Colour registry: RED, GREEN and BLUE plus whatever the colour source supplies."""

from dynamic_enum.core.config import settings
from dynamic_enum.core.enum_registry import EnumRegistry
from dynamic_enum.core.protocols.data_source import DataSourceProtocol
from dynamic_enum.core.serialization import entry_reference
from dynamic_enum.domains.colours.types import BUILTIN_COLOURS, Colour, ColourRecord


def _default_colour_source() -> DataSourceProtocol[ColourRecord]:
    # Imported lazily: the adapters import the colour types.
    from dynamic_enum.adapters.colour_source.factory import create_colour_source

    return create_colour_source(settings)


colour_registry: EnumRegistry[Colour, ColourRecord] = EnumRegistry(
    Colour,
    BUILTIN_COLOURS,
    default_source_factory=_default_colour_source,
)

ColourRef = entry_reference(colour_registry)
"""Pydantic field type that stores a Colour by name."""


def value_of(name: str) -> Colour:
    """Get the colour named ``name``. Raises UnknownEntryError if there is none."""
    return colour_registry.value_of(name)


def values() -> list[Colour]:
    """All colours, ordered by sequence."""
    return colour_registry.values()


def bind_data_source(source: DataSourceProtocol[ColourRecord]) -> None:
    """Bind the colour source used when the registry populates.

    Must happen before the first lookup; tests should reset the registry
    between bindings.
    """
    colour_registry.bind_data_source(source)


def current_data_source() -> DataSourceProtocol[ColourRecord]:
    """The bound colour source (the configured default if none was bound)."""
    return colour_registry.current_data_source()
