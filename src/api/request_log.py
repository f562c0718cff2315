"""Request logging for API."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger("api.requests")


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    details: list[tuple[str, str]] = field(default_factory=list)  # (type, message)


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def current_request_log(request: Request) -> RequestLog | None:
    return getattr(request.state, "request_log", None)


def log_request(log: RequestLog) -> None:
    """Emit one summary line per request, plus one per detail."""
    level = logging.INFO if log.status_code < 500 else logging.ERROR
    logger.log(
        level,
        "%s %s %s -> %d in %dms [%s]%s",
        log.request_id,
        log.method,
        log.endpoint,
        log.status_code,
        log.processing_time_ms,
        log.client_ip,
        f" {log.error_code}: {log.error_message}" if log.error_code else "",
    )
    for detail_type, message in log.details:
        logger.debug("%s %s: %s", log.request_id, detail_type, message)
