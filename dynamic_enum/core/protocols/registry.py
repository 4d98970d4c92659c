"""Protocols for registries."""

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from dynamic_enum.core.value_entry import ValueEntry

EntryT = TypeVar("EntryT", bound="ValueEntry", covariant=True)


class RegistryProtocol(Protocol[EntryT]):
    """Read side of an enum registry.

    Populated once on first access. All lookups after that are dict reads.
    """

    def value_of(self, name: str) -> EntryT:
        """Get an entry by exact name. Raises UnknownEntryError if not found."""
        ...

    def values(self) -> list[EntryT]:
        """List all entries, ordered by sequence."""
        ...
