"""Fake colour source for testing.

Returns canned records and records every fetch, with optional failure and
delay injection.
"""

import threading
import time
from typing import Iterable, Optional

from dynamic_enum.domains.colours.types import ColourRecord


class FakeColourSource:
    """Test implementation of the colour data source.

    Usage:
        fake = FakeColourSource([ColourRecord(name="BLACK", r=0, g=0, b=0, sequence=3)])
        colour_registry.bind_data_source(fake)

        assert value_of("BLACK").sequence == 3
        assert fake.fetch_count == 1
    """

    def __init__(
        self,
        records: Iterable[ColourRecord] = (),
        *,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ) -> None:
        """Initialize the fake.

        Args:
            records: Records returned by every fetch, in order.
            error: If set, every fetch raises it instead of returning records.
            delay: Seconds to sleep inside each fetch (to widen race windows).
        """
        self.records: list[ColourRecord] = list(records)
        self.error = error
        self.delay = delay
        self._fetch_count = 0
        self._lock = threading.Lock()

    def fetch_records(self) -> list[ColourRecord]:
        """Return the canned records (or raise the configured error)."""
        with self._lock:
            self._fetch_count += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.records)

    # Test helpers

    @property
    def fetch_count(self) -> int:
        """Number of fetch_records() calls so far."""
        return self._fetch_count

    def fail_with(self, error: Optional[Exception]) -> None:
        """Raise ``error`` on subsequent fetches (None to stop failing)."""
        self.error = error
