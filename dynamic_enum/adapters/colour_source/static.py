"""Static colour source: the default when nothing else is configured."""

from dynamic_enum.domains.colours.types import ColourRecord


class StaticColourSource:
    """Colour source backed by a fixed record list.

    Supplies BLACK and WHITE, numbered after the built-in constants.
    """

    RECORDS: tuple[ColourRecord, ...] = (
        ColourRecord(name="BLACK", r=0, g=0, b=0, sequence=4),
        ColourRecord(name="WHITE", r=255, g=255, b=255, sequence=5),
    )

    def fetch_records(self) -> list[ColourRecord]:
        """Return the fixed records."""
        return list(self.RECORDS)
