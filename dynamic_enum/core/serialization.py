"""Name-only serialization of registry entries for pydantic models.

An entry is written as its name and read back through ``value_of``, so a
model that round-trips through JSON holds the registry's own instances.

Usage:
    ColourRef = entry_reference(colour_registry)

    class Palette(BaseModel):
        primary: ColourRef

    Palette(primary="RED").primary is RED  # True
    Palette(primary=RED).model_dump()      # {"primary": "RED"}
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from dynamic_enum.core.enum_registry import EnumRegistry
from dynamic_enum.core.exceptions import UnknownEntryError


def entry_reference(registry: EnumRegistry) -> Any:
    """Build an Annotated type that stores entries of ``registry`` by name.

    Args:
        registry: Registry used to resolve names on validation.

    Returns:
        ``Annotated[entry_type, ...]`` usable as a pydantic field type.
    """
    entry_type = registry.entry_type

    def _validate(value: Any) -> Any:
        if isinstance(value, entry_type):
            name = value.name
        elif isinstance(value, str):
            name = value
        else:
            raise ValueError(
                f"Expected {entry_type.__name__} or its name, got {type(value).__name__}"
            )
        try:
            return registry.value_of(name)
        except UnknownEntryError as e:
            raise ValueError(e.message) from e

    return Annotated[
        entry_type,
        PlainValidator(_validate),
        PlainSerializer(lambda entry: entry.name, return_type=str),
    ]
