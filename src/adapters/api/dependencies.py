from __future__ import annotations

import os

from src.app.services.utm_service import UtmService


def get_utm_service() -> UtmService:
    # Text shown in place of a reference the projector cannot produce.
    placeholder = os.getenv("UTM_PLACEHOLDER", "")
    return UtmService(placeholder=placeholder)
