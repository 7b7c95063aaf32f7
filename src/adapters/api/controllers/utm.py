from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_utm_service
from src.adapters.api.schemas.utm import FormattedUtmSchema, UtmReferenceSchema
from src.app.services.utm_service import UtmService

router = APIRouter(prefix="/utm", tags=["utm"])


@router.get("", response_model=UtmReferenceSchema)
def get_utm(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    service: UtmService = Depends(get_utm_service),
) -> UtmReferenceSchema:
    # ProjectionError propagates to the app-level handler (422).
    ref = service.convert(lat=lat, lon=lon)
    return UtmReferenceSchema(
        zone_number=ref.zone_number,
        zone_letter=ref.zone_letter,
        easting=ref.easting,
        northing=ref.northing,
        text=ref.format(),
    )


@router.get("/text", response_model=FormattedUtmSchema)
def get_utm_text(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lon: float = Query(..., ge=-180.0, le=180.0),
    service: UtmService = Depends(get_utm_service),
) -> FormattedUtmSchema:
    text = service.format_or_placeholder(lat=lat, lon=lon)
    return FormattedUtmSchema(text=text, ok=text != service.placeholder)
