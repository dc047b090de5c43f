from __future__ import annotations

from fastapi.responses import JSONResponse

from app.application.exceptions import BookingError


def error_response(exc: BookingError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
