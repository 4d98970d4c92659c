"""Colour source that reads records from a JSON file.

Expected file content is an array of objects:

    [
        {"name": "BLACK", "r": 0, "g": 0, "b": 0, "sequence": 4},
        {"name": "WHITE", "r": 255, "g": 255, "b": 255, "sequence": 5}
    ]
"""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from dynamic_enum.core.exceptions import DataSourceError
from dynamic_enum.core.logging import logger
from dynamic_enum.domains.colours.types import ColourRecord

_RECORDS_ADAPTER = TypeAdapter(list[ColourRecord])


class JsonFileColourSource:
    """Reads the file on every fetch; the registry fetches once."""

    def __init__(self, path: Path) -> None:
        """Initialize the source.

        Args:
            path: Location of the JSON record file.
        """
        self.path = Path(path)
        self._logger = logger.with_prefix("JsonFileColourSource: ").with_context(
            component="colour_source", path=str(self.path)
        )

    def fetch_records(self) -> list[ColourRecord]:
        """Read and validate the record file.

        Raises:
            DataSourceError: If the file cannot be read or does not hold valid records.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise DataSourceError(str(self.path), f"cannot read file: {e}") from e

        try:
            records = _RECORDS_ADAPTER.validate_json(raw)
        except ValidationError as e:
            raise DataSourceError(str(self.path), f"invalid colour records: {e}") from e

        self._logger.debug(f"Loaded {len(records)} colour records")
        return records
