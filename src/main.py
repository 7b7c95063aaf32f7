from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.utm import router as utm_router
from src.domain.exceptions import ProjectionError

app = FastAPI(title="UtmGrid")
app.include_router(utm_router)


@app.exception_handler(ProjectionError)
async def projection_error_handler(
    request: Request, exc: ProjectionError
) -> JSONResponse:
    logging.getLogger("uvicorn.error").info(
        "Projection rejected: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": exc.__class__.__name__},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON rather than Starlette's plain-text 500."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("UTM_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
