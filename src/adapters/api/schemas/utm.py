from __future__ import annotations

from pydantic import BaseModel, Field


class UtmReferenceSchema(BaseModel):
    zone_number: int = Field(..., ge=1, le=60)
    zone_letter: str = Field(..., min_length=1, max_length=1)
    easting: float
    northing: float
    text: str


class FormattedUtmSchema(BaseModel):
    text: str
    ok: bool
