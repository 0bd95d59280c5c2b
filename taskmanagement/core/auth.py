"""
Authentication module for the Task Management service.
Every request must carry the shared static API key in a header.
"""
import logging
import secrets
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .config import get_settings

# Configure logging
logger = logging.getLogger(__name__)

UNAUTHORIZED_BODY = {
    "error": "Unauthorized",
    "message": "Invalid or missing API key",
}


def is_valid_api_key(provided: Optional[str], expected: str) -> bool:
    """Compare an inbound key against the configured secret."""
    if provided is None or not expected:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


class ApiKeyGate:
    """
    HTTP middleware rejecting requests without the configured API key.

    The key is captured once when the gate is built and never changes for the
    lifetime of the process. Rejected requests never reach a router.
    """

    def __init__(self, api_key: str, header_name: str = "X-API-KEY"):
        self.api_key = api_key
        self.header_name = header_name

    @classmethod
    def from_settings(cls) -> "ApiKeyGate":
        settings = get_settings()
        return cls(settings.api_key, settings.api_key_header)

    async def __call__(self, request: Request, call_next):
        provided = request.headers.get(self.header_name)
        if not is_valid_api_key(provided, self.api_key):
            client = request.client.host if request.client else "unknown"
            logger.warning(
                f"Rejected {request.method} {request.url.path} from {client}: "
                f"{'missing' if provided is None else 'invalid'} API key"
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=UNAUTHORIZED_BODY,
            )

        return await call_next(request)
