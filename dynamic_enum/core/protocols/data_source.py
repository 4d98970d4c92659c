"""Protocol for the external data sources that feed a registry."""

from typing import Protocol, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class DataSourceRecord(BaseModel):
    """One raw record handed to a registry by a data source.

    Domains subclass this and add their payload fields; the matching
    ValueEntry subclass declares the same fields.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    sequence: int


RecordT = TypeVar("RecordT", bound=DataSourceRecord, covariant=True)


class DataSourceProtocol(Protocol[RecordT]):
    """Supplies dynamic entries to a registry.

    Queried exactly once per population. Synchronous and exception-transparent:
    whatever it raises reaches the caller that triggered population.
    """

    def fetch_records(self) -> Sequence[RecordT]:
        """Return the current records, in the order they should be registered."""
        ...
