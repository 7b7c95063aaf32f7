from .geo import GeoPoint
from .utm import UtmReference

__all__ = [
    "GeoPoint",
    "UtmReference",
]
