"""Builds the configured colour source."""

from typing import TYPE_CHECKING

from dynamic_enum.adapters.colour_source.http import HttpColourSource
from dynamic_enum.adapters.colour_source.json_file import JsonFileColourSource
from dynamic_enum.adapters.colour_source.static import StaticColourSource
from dynamic_enum.core.config.enums import ColourSourceType
from dynamic_enum.core.protocols.data_source import DataSourceProtocol
from dynamic_enum.domains.colours.types import ColourRecord

if TYPE_CHECKING:
    from dynamic_enum.core.config import Settings


def create_colour_source(settings: "Settings") -> DataSourceProtocol[ColourRecord]:
    """Create the colour source selected by ``settings.COLOUR_SOURCE``.

    Args:
        settings: Application settings.

    Returns:
        A static, file or HTTP colour source.

    Raises:
        ValueError: If the selected source is missing its path or URL. Only
            reachable with settings built via ``model_construct``.
    """
    if settings.COLOUR_SOURCE == ColourSourceType.FILE:
        if settings.COLOUR_SOURCE_PATH is None:
            raise ValueError("Invalid config: COLOUR_SOURCE=file requires COLOUR_SOURCE_PATH")
        return JsonFileColourSource(settings.COLOUR_SOURCE_PATH)

    if settings.COLOUR_SOURCE == ColourSourceType.HTTP:
        if not settings.COLOUR_SOURCE_URL:
            raise ValueError("Invalid config: COLOUR_SOURCE=http requires COLOUR_SOURCE_URL")
        return HttpColourSource(settings.COLOUR_SOURCE_URL, timeout=settings.COLOUR_SOURCE_TIMEOUT)

    return StaticColourSource()
