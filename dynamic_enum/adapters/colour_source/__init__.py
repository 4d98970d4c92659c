"""Colour source adapters."""

from dynamic_enum.adapters.colour_source.factory import create_colour_source
from dynamic_enum.adapters.colour_source.fake import FakeColourSource
from dynamic_enum.adapters.colour_source.http import HttpColourSource
from dynamic_enum.adapters.colour_source.json_file import JsonFileColourSource
from dynamic_enum.adapters.colour_source.static import StaticColourSource

__all__ = [
    "FakeColourSource",
    "HttpColourSource",
    "JsonFileColourSource",
    "StaticColourSource",
    "create_colour_source",
]
