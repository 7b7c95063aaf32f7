from __future__ import annotations

import math
from dataclasses import dataclass

from src.domain.exceptions.projection import CoordinateOutOfRange, NonFiniteInput


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.lat):
            raise NonFiniteInput("latitude", self.lat)
        if not math.isfinite(self.lon):
            raise NonFiniteInput("longitude", self.lon)
        if not (-90.0 <= self.lat <= 90.0):
            raise CoordinateOutOfRange("latitude", self.lat)
        if not (-180.0 <= self.lon <= 180.0):
            raise CoordinateOutOfRange("longitude", self.lon)
