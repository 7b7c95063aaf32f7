"""Geodetic (WGS84 lat/lon) to UTM grid projection.

Zone resolution follows the UTM grid with its Norway and Svalbard
exceptions; the projection is the closed-form Transverse Mercator series
(Snyder, Map Projections - A Working Manual, USGS PP 1395, pp. 61-64).
"""

from __future__ import annotations

import math

from src.domain.exceptions.projection import InvalidZoneLetterIndex, NonFiniteInput
from src.domain.models.geo import GeoPoint
from src.domain.models.utm import UtmReference

MAJOR_AXIS = 6378137.0
MINOR_AXIS = 6356752.314
SCALE_FACTOR = 0.9996

ECCENTRICITY_SQUARED = (MAJOR_AXIS**2 - MINOR_AXIS**2) / MAJOR_AXIS**2
ECCENTRICITY_PRIME_SQUARED = ECCENTRICITY_SQUARED / (1.0 - ECCENTRICITY_SQUARED)

FALSE_EASTING = 0.5e6
FALSE_NORTHING_SOUTH = 10.0e6

# 21 entries: the last band (X, 72..84) is 12 degrees tall.
ZONE_LETTERS = "CDEFGHJKLMNPQRSTUVWXX"

_E = ECCENTRICITY_SQUARED
_M1 = 1.0 - _E / 4.0 - 3.0 * _E**2 / 64.0 - 5.0 * _E**3 / 256.0
_M2 = 3.0 * _E / 8.0 + 3.0 * _E**2 / 32.0 + 45.0 * _E**3 / 1024.0
_M3 = 15.0 * _E**2 / 256.0 + 45.0 * _E**3 / 1024.0
_M4 = 35.0 * _E**3 / 3072.0


def longitudinal_zone(lat: float, lon: float) -> int:
    """UTM zone number (1..60) including the Norway/Svalbard exceptions."""

    if 56.0 <= lat < 64.0 and 3.0 <= lon < 12.0:
        return 32

    # Svalbard
    if 72.0 <= lat < 84.0:
        if 0.0 <= lon < 9.0:
            return 31
        if 9.0 <= lon < 21.0:
            return 33
        if 21.0 <= lon < 33.0:
            return 35
        if 33.0 <= lon < 42.0:
            return 37

    # 180 and -180 are the same meridian.
    if lon >= 180.0:
        lon -= 360.0
    return math.floor((lon + 180.0) / 6.0) + 1


def latitudinal_zone_letter(lat: float) -> str:
    index = math.floor((lat + 80.0) / 8.0)
    if not (0 <= index < len(ZONE_LETTERS)):
        raise InvalidZoneLetterIndex(lat, index)
    return ZONE_LETTERS[index]


def zone_origin_meridian(zone_number: int) -> float:
    """Central meridian of a zone, in degrees."""

    return (zone_number - 1) * 6.0 - 180.0 + 3.0


def meridional_arc(lat_rad: float) -> float:
    """Meridian distance in meters from the equator to `lat_rad`."""

    return MAJOR_AXIS * (
        _M1 * lat_rad
        - _M2 * math.sin(2.0 * lat_rad)
        + _M3 * math.sin(4.0 * lat_rad)
        - _M4 * math.sin(6.0 * lat_rad)
    )


def project(point: GeoPoint) -> UtmReference:
    zone_number = longitudinal_zone(point.lat, point.lon)
    zone_letter = latitudinal_zone_letter(point.lat)

    lat_rad = math.radians(point.lat)
    lon_rad = math.radians(point.lon)
    origin_rad = math.radians(zone_origin_meridian(zone_number))

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    tan_lat = math.tan(lat_rad)

    ep2 = ECCENTRICITY_PRIME_SQUARED
    n = MAJOR_AXIS / math.sqrt(1.0 - ECCENTRICITY_SQUARED * sin_lat * sin_lat)
    t = tan_lat * tan_lat
    c = ep2 * cos_lat * cos_lat
    # For lon == 180 in zone 1, fold the offset back into [-pi, pi).
    delta = math.remainder(lon_rad - origin_rad, 2.0 * math.pi)
    a = cos_lat * delta
    m = meridional_arc(lat_rad)

    easting = (
        SCALE_FACTOR
        * n
        * (
            a
            + (1.0 - t + c) * a**3 / 6.0
            + (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * ep2) * a**5 / 120.0
        )
        + FALSE_EASTING
    )

    northing = SCALE_FACTOR * (
        m
        + n
        * tan_lat
        * (
            a * a / 2.0
            + (5.0 - t + 9.0 * c + 4.0 * c * c) * a**4 / 24.0
            + (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * ep2) * a**6 / 720.0
        )
    )

    if point.lat < 0.0:
        northing += FALSE_NORTHING_SOUTH

    if not math.isfinite(easting):
        raise NonFiniteInput("easting", easting)
    if not math.isfinite(northing):
        raise NonFiniteInput("northing", northing)

    return UtmReference(
        zone_number=zone_number,
        zone_letter=zone_letter,
        easting=easting,
        northing=northing,
    )


def convert_to_utm(latitude: float, longitude: float) -> str:
    """Convert WGS84 decimal degrees to a `"32U 500000 5300000"` style string."""

    return project(GeoPoint(lat=float(latitude), lon=float(longitude))).format()
