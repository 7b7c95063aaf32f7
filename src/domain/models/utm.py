from __future__ import annotations

import math
from dataclasses import dataclass

# Latitude bands from -80 (C) to 84 (X); I and O are skipped.
BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    `round()` would use banker's rounding, which shifts exact half-meter
    values to the even neighbour.
    """

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True, slots=True)
class UtmReference:
    zone_number: int
    zone_letter: str
    easting: float
    northing: float

    def __post_init__(self) -> None:
        if not (1 <= self.zone_number <= 60):
            raise ValueError(f"Invalid UTM zone number: {self.zone_number}")
        if len(self.zone_letter) != 1 or self.zone_letter not in BAND_LETTERS:
            raise ValueError(f"Invalid UTM zone letter: {self.zone_letter!r}")

    @property
    def zone(self) -> str:
        return f"{self.zone_number}{self.zone_letter}"

    @property
    def hemisphere(self) -> str:
        return "N" if self.zone_letter >= "N" else "S"

    def format(self) -> str:
        """Render as `"<zone> <easting> <northing>"` in whole meters."""

        return (
            f"{self.zone} {round_half_away(self.easting)}"
            f" {round_half_away(self.northing)}"
        )

    def __str__(self) -> str:
        return self.format()
