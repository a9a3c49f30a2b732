"""HTTP error factories for the two failure kinds the service reports."""

from fastapi import HTTPException

INVALID_INPUT = "Invalid input"
PROCESSING_ERROR = "Processing error"


def invalid_input_exception(message: str) -> HTTPException:
    """400 for a body that is missing a field or has the wrong shape."""
    return HTTPException(
        status_code=400,
        detail={"error": INVALID_INPUT, "message": message},
    )


def processing_error_exception(message: str) -> HTTPException:
    """500 for a downstream failure; the underlying message is passed through."""
    return HTTPException(
        status_code=500,
        detail={"error": PROCESSING_ERROR, "message": message},
    )
