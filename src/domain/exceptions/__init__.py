from .projection import (
    CoordinateOutOfRange,
    InvalidZoneLetterIndex,
    NonFiniteInput,
    ProjectionError,
)

__all__ = [
    "CoordinateOutOfRange",
    "InvalidZoneLetterIndex",
    "NonFiniteInput",
    "ProjectionError",
]
