"""
Request logging for the Task Management service.
"""
import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

QUIET_PATHS = ("/health",)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT
    )


async def request_logging_middleware(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()

    response = await call_next(request)
    process_time = time.time() - start_time

    # Add timing header
    response.headers["X-Process-Time"] = str(process_time)

    # Skip logging for health checks to reduce noise
    if request.url.path not in QUIET_PATHS:
        logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response
