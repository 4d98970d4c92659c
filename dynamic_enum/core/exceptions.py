"""Shared exceptions module."""

from typing import Optional


class DynamicEnumException(Exception):
    """Base exception for dynamic_enum."""

    pass


class NotFoundException(DynamicEnumException):
    """Exception raised when an object is not found."""

    def __init__(self, message: Optional[str] = "Object not found"):
        """Create a new NotFoundException instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class UnknownEntryError(NotFoundException):
    """Raised when a registry has no entry with the requested name."""

    def __init__(self, name: str, type_name: str = "entry"):
        """Create a new UnknownEntryError instance.

        Args:
        ----
            name (str): The name that was looked up.
            type_name (str): The entry type, used in the message (e.g. "Colour").

        """
        self.name = name
        self.type_name = type_name
        super().__init__(f"No {type_name} by the name {name} found")


class DuplicationNotSupportedError(DynamicEnumException):
    """Raised on any attempt to copy a registry entry.

    Every name has exactly one canonical instance; a copy would be a second one.
    """

    def __init__(self, name: str):
        """Create a new DuplicationNotSupportedError instance.

        Args:
        ----
            name (str): Name of the entry that was about to be duplicated.

        """
        self.name = name
        self.message = f"Entry '{name}' cannot be duplicated"
        super().__init__(self.message)


class DataSourceError(DynamicEnumException):
    """Raised by a data source when its records cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        """Create a new DataSourceError instance.

        Args:
        ----
            source (str): Human readable identifier of the source (path, URL, ...).
            reason (str): What went wrong.

        """
        self.source = source
        self.reason = reason
        self.message = f"Failed to fetch records from {source}: {reason}"
        super().__init__(self.message)
