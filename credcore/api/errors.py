"""
Exception handlers rendering toolkit errors as the canonical envelope.

Every handled error produces ``{"status": "error", "message": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from credcore.core.errors import (
    ConfigurationError,
    CredcoreError,
    EntropySourceUnavailableError,
    InvalidArgumentError,
    InvalidHashFormatError,
    MalformedSignatureError,
    SignatureMismatchError,
)
from credcore.core.logging import get_logger

logger = get_logger(__name__)

# Most specific classes first
STATUS_CODES: list[tuple[type[CredcoreError], int]] = [
    (SignatureMismatchError, status.HTTP_401_UNAUTHORIZED),
    (MalformedSignatureError, status.HTTP_400_BAD_REQUEST),
    (InvalidHashFormatError, status.HTTP_400_BAD_REQUEST),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (EntropySourceUnavailableError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_code_for(error: CredcoreError) -> int:
    """
    Pick the HTTP status for an error.

    Args:
        error: Toolkit error.

    Returns:
        int: HTTP status code, 500 for unmapped errors.
    """
    for error_type, code in STATUS_CODES:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def credcore_error_handler(request: Request, exc: CredcoreError) -> JSONResponse:
    """Render a toolkit error as an envelope response."""
    code = status_code_for(exc)
    log = logger.error if code >= 500 else logger.warning
    log(
        "request_rejected",
        error=type(exc).__name__,
        path=request.url.path,
        status_code=code,
    )
    return JSONResponse(status_code=code, content=exc.to_envelope())


def register_error_handlers(app: FastAPI) -> None:
    """
    Install envelope handlers on an application.

    Args:
        app: FastAPI application.
    """
    app.add_exception_handler(CredcoreError, credcore_error_handler)
