"""Configuration enums for type-safe settings.

These enums provide type safety and IDE autocomplete for configuration values.
They inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class ColourSourceType(str, Enum):
    """Colour data source types.

    Determines which data source the colour registry consults when it is
    populated.
    """

    STATIC = "static"
    FILE = "file"
    HTTP = "http"


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior like log formatting.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"
