from __future__ import annotations


class ProjectionError(ValueError):
    """Base exception for coordinate projection failures."""


class NonFiniteInput(ProjectionError):
    """Raised when a coordinate (or a value derived from it) is NaN or infinite."""

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"Non-finite {name}: {value}")
        self.name = name
        self.value = value


class CoordinateOutOfRange(ProjectionError):
    """Raised when a latitude/longitude lies outside the geographic range."""

    def __init__(self, name: str, value: float) -> None:
        super().__init__(f"Invalid {name}: {value}")
        self.name = name
        self.value = value


class InvalidZoneLetterIndex(ProjectionError):
    """Raised when a latitude has no UTM latitude band (beyond -80 / 84)."""

    def __init__(self, latitude: float, index: int) -> None:
        super().__init__(
            f"No UTM latitude band for latitude {latitude} (band index {index})"
        )
        self.latitude = latitude
        self.index = index
