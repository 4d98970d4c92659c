"""Immutable, singleton-identity registry entries.

A ValueEntry behaves like a member of an enum whose set of members is only
known at runtime:

- equality is identity: two handles are equal only if they are the same object
- ordering is by ``sequence``
- copying is refused, so a name never has a second instance
- pickling stores the name only and resolves it through the owning registry,
  so an unpickled entry *is* the registry's entry
"""

from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from dynamic_enum.core.exceptions import DuplicationNotSupportedError, UnknownEntryError
from dynamic_enum.core.protocols.data_source import DataSourceRecord

if TYPE_CHECKING:
    from dynamic_enum.core.protocols.registry import RegistryProtocol

EntrySelf = TypeVar("EntrySelf", bound="ValueEntry")


def _resolve_entry(entry_type: type["ValueEntry"], name: str) -> "ValueEntry":
    """Unpickling hook: map a name back to the canonical instance."""
    registry = entry_type._enum_registry
    if registry is None:
        raise UnknownEntryError(name, entry_type.__name__)
    return registry.value_of(name)


class ValueEntry(BaseModel):
    """Base class for registry entries.

    Subclasses declare the payload fields. Instances are frozen; the
    registry that owns a subclass binds itself to ``_enum_registry``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    sequence: int

    _enum_registry: ClassVar[Optional["RegistryProtocol[Any]"]] = None

    @classmethod
    def from_record(cls: type[EntrySelf], record: DataSourceRecord) -> EntrySelf:
        """Build an entry from a data source record carrying the same fields.

        Produces the same field values as calling the constructor directly.
        """
        return cls.model_validate(record.model_dump(include=set(cls.model_fields)))

    # ------------------------------------------------------------------
    # Identity and ordering
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def compare_to(self, other: "ValueEntry") -> int:
        """Negative, zero or positive as this entry sorts before, with or after ``other``."""
        return self.sequence - other.sequence

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ValueEntry):
            return NotImplemented
        return self.sequence < other.sequence

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ValueEntry):
            return NotImplemented
        return self.sequence <= other.sequence

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ValueEntry):
            return NotImplemented
        return self.sequence > other.sequence

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ValueEntry):
            return NotImplemented
        return self.sequence >= other.sequence

    # ------------------------------------------------------------------
    # Duplication
    # ------------------------------------------------------------------

    def clone(self) -> "ValueEntry":
        """Always raises DuplicationNotSupportedError."""
        raise DuplicationNotSupportedError(self.name)

    def __copy__(self) -> "ValueEntry":
        raise DuplicationNotSupportedError(self.name)

    def __deepcopy__(self, memo: Optional[dict[int, Any]] = None) -> "ValueEntry":
        raise DuplicationNotSupportedError(self.name)

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "ValueEntry":
        """Always raises DuplicationNotSupportedError."""
        raise DuplicationNotSupportedError(self.name)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def __reduce__(self) -> tuple[Any, ...]:
        return (_resolve_entry, (type(self), self.name))

    def __reduce_ex__(self, protocol: Any) -> tuple[Any, ...]:
        return self.__reduce__()
