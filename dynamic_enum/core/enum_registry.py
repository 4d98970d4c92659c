"""Enum registry: a closed set of constants reopened at runtime.

The registry starts from a hand-maintained, ordered list of build-time
constants and extends it once with records from a bound data source. After
that single population it is read-only.

Lifecycle:
    Uninitialized --populate()--> Populated

Population happens at most once per process (``reset()`` exists for tests
only). A failed population leaves the registry Uninitialized so the next
access retries it.
"""

import threading
from typing import Callable, Generic, Iterator, Optional, Sequence, TypeVar

from dynamic_enum.core.exceptions import UnknownEntryError
from dynamic_enum.core.logging import ContextualLogger, logger
from dynamic_enum.core.protocols.data_source import DataSourceProtocol, DataSourceRecord
from dynamic_enum.core.protocols.registry import RegistryProtocol
from dynamic_enum.core.value_entry import ValueEntry

EntryT = TypeVar("EntryT", bound=ValueEntry)
RecordT = TypeVar("RecordT", bound=DataSourceRecord)


class EnumRegistry(RegistryProtocol[EntryT], Generic[EntryT, RecordT]):
    """Process-wide registry of ValueEntry singletons, keyed by name."""

    def __init__(
        self,
        entry_type: type[EntryT],
        constants: Sequence[EntryT],
        default_source_factory: Callable[[], DataSourceProtocol[RecordT]],
    ) -> None:
        """Initialize the registry. Nothing is populated yet.

        Args:
            entry_type: The ValueEntry subclass this registry owns. The
                registry binds itself to it so pickled entries can be resolved.
            constants: Build-time constants, in declaration order.
            default_source_factory: Builds the data source used when none
                has been bound explicitly.
        """
        self._entry_type = entry_type
        self._constants = tuple(constants)
        self._default_source_factory = default_source_factory
        self._source: Optional[DataSourceProtocol[RecordT]] = None
        self._entries: Optional[dict[str, EntryT]] = None
        self._lock = threading.Lock()
        self._logger: ContextualLogger = logger.with_prefix(
            f"EnumRegistry[{entry_type.__name__}]: "
        ).with_context(component="enum_registry", entry_type=entry_type.__name__)

        entry_type._enum_registry = self

    @property
    def entry_type(self) -> type[EntryT]:
        """The ValueEntry subclass held by this registry."""
        return self._entry_type

    @property
    def is_populated(self) -> bool:
        """Whether population has completed."""
        return self._entries is not None

    # ------------------------------------------------------------------
    # Lookup and enumeration
    # ------------------------------------------------------------------

    def value_of(self, name: str) -> EntryT:
        """Get the entry registered under ``name``.

        Args:
            name: Exact, case-sensitive entry name (e.g. "RED").

        Returns:
            The canonical instance for that name.

        Raises:
            UnknownEntryError: If no entry with that name is registered.
        """
        entries = self._populated_entries()
        entry = entries.get(name)
        if entry is None:
            raise UnknownEntryError(name, self._entry_type.__name__)
        return entry

    def values(self) -> list[EntryT]:
        """List all entries sorted by sequence.

        Returns a new list on every call. Entries sharing a sequence keep
        their registration order.
        """
        return sorted(self._populated_entries().values(), key=lambda entry: entry.sequence)

    def names(self) -> list[str]:
        """Names of all entries, in ``values()`` order."""
        return [entry.name for entry in self.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._populated_entries()

    def __len__(self) -> int:
        return len(self._populated_entries())

    def __iter__(self) -> Iterator[EntryT]:
        return iter(self.values())

    # ------------------------------------------------------------------
    # Data source binding
    # ------------------------------------------------------------------

    def bind_data_source(self, source: DataSourceProtocol[RecordT]) -> None:
        """Replace the data source consulted during population.

        Has no effect on an already populated registry.
        """
        with self._lock:
            if self._entries is not None:
                self._logger.warning(
                    f"Data source {type(source).__name__} bound after population; "
                    "registered entries are unchanged."
                )
            self._source = source

    def current_data_source(self) -> DataSourceProtocol[RecordT]:
        """Return the bound data source, binding the default one if none is set."""
        with self._lock:
            return self._current_source_locked()

    def _current_source_locked(self) -> DataSourceProtocol[RecordT]:
        if self._source is None:
            self._source = self._default_source_factory()
        return self._source

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def populate(self) -> None:
        """Populate the registry if it has not been populated yet.

        Inserts the build-time constants in declaration order, then every
        record from the data source whose name is not taken yet. First
        registration wins; later records with the same name are discarded.
        Sequences are kept as given.

        Raises:
            Whatever the data source raises. The registry stays unpopulated.
        """
        if self._entries is not None:
            return

        with self._lock:
            if self._entries is not None:
                return

            source = self._current_source_locked()
            entries: dict[str, EntryT] = {}

            for constant in self._constants:
                if constant.name in entries:
                    self._logger.debug(f"Skipping duplicate constant '{constant.name}'")
                    continue
                entries[constant.name] = constant

            constant_count = len(entries)
            discarded = 0
            try:
                for record in source.fetch_records():
                    if record.name in entries:
                        discarded += 1
                        self._logger.debug(
                            f"Discarding record '{record.name}' (sequence {record.sequence}); "
                            "name already registered"
                        )
                        continue
                    entries[record.name] = self._entry_type.from_record(record)
            except Exception as e:
                self._logger.error(
                    f"Population failed with records from {type(source).__name__}: {e}"
                )
                raise

            self._entries = entries

        self._logger.info(
            f"Populated with {len(entries)} entries ({constant_count} constants, "
            f"{len(entries) - constant_count} dynamic, {discarded} discarded)."
        )

    def _populated_entries(self) -> dict[str, EntryT]:
        self.populate()
        entries = self._entries
        assert entries is not None
        return entries

    # ------------------------------------------------------------------
    # Test support
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Return to the Uninitialized state and drop the data source binding.

        For testing only. Entries handed out before the reset are no longer
        canonical after the next population.

        WARNING: Do not use in production code.
        """
        with self._lock:
            self._entries = None
            self._source = None
