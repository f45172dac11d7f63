"""Response utility functions."""

from fastapi import status
from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> JSONResponse:
    """Create standardized error response."""
    return JSONResponse(
        content={"error": message},
        status_code=status_code
    )
