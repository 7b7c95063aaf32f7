from __future__ import annotations

import logging
from dataclasses import dataclass

from src.domain.algorithms.utm import project
from src.domain.exceptions import ProjectionError
from src.domain.models import GeoPoint, UtmReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UtmService:
    """Formats coordinates as UTM grid references for display.

    - `convert` / `format` raise `ProjectionError` for unprojectable input.
    - `format_or_placeholder` is for views that must always render
      something; it logs the failure and returns `placeholder`.
    """

    placeholder: str = ""

    def convert(self, *, lat: float, lon: float) -> UtmReference:
        ref = project(GeoPoint(lat=lat, lon=lon))
        logger.debug("Projected (%s, %s) to %s", lat, lon, ref)
        return ref

    def format(self, *, lat: float, lon: float) -> str:
        return self.convert(lat=lat, lon=lon).format()

    def format_or_placeholder(self, *, lat: float, lon: float) -> str:
        try:
            return self.format(lat=lat, lon=lon)
        except ProjectionError as exc:
            logger.warning("Cannot project (%s, %s) to UTM: %s", lat, lon, exc)
            return self.placeholder
