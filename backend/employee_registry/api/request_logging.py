"""Request Logging — one access-log line per request, filtered by status code.

Invariants:
    - Responses with status < skip_code_threshold are not logged
    - A request whose handler raised is logged as status 500, then re-raised
    - Line layout is one of the predefined formats (tiny, short, dev, common, combined)

Design Decisions:
    - Plain HTTP middleware over uvicorn's access log: format and threshold are
      application settings, and uvicorn's logger cannot filter by status
    - Formats are str.format templates over a flat field dict so rendering is
      testable without a running app
"""

import logging
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger("employee_registry.access")

REQUEST_LOG_FORMATS: dict[str, str] = {
    "tiny": "{method} {url} {status} {content_length} - {response_time} ms",
    "short": (
        "{remote_addr} {remote_user} {method} {url} HTTP/{http_version} "
        "{status} {content_length} - {response_time} ms"
    ),
    "dev": "{method} {url} {status} {response_time} ms - {content_length}",
    "common": (
        '{remote_addr} - {remote_user} [{date}] '
        '"{method} {url} HTTP/{http_version}" {status} {content_length}'
    ),
    "combined": (
        '{remote_addr} - {remote_user} [{date}] '
        '"{method} {url} HTTP/{http_version}" {status} {content_length} '
        '"{referrer}" "{user_agent}"'
    ),
}

CallNext = Callable[[Request], Awaitable[Response]]


def should_log(status_code: int, skip_code_threshold: int) -> bool:
    return status_code >= skip_code_threshold


def format_request_line(fmt: str, fields: dict[str, str]) -> str:
    """Render an access-log line; unknown format names fall back to tiny."""
    template = REQUEST_LOG_FORMATS.get(fmt, REQUEST_LOG_FORMATS["tiny"])
    return template.format(**fields)


def collect_fields(
    request: Request, status_code: int, content_length: str | None,
    elapsed_seconds: float,
) -> dict[str, str]:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return {
        "method": request.method,
        "url": url,
        "status": str(status_code),
        "content_length": content_length or "-",
        "response_time": f"{elapsed_seconds * 1000:.3f}",
        "remote_addr": request.client.host if request.client else "-",
        "remote_user": "-",
        "http_version": request.scope.get("http_version", "1.1"),
        "date": datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S +0000"),
        "referrer": request.headers.get("referer", "-"),
        "user_agent": request.headers.get("user-agent", "-"),
    }


def make_request_logger(
    fmt: str, skip_code_threshold: int,
) -> Callable[[Request, CallNext], Awaitable[Response]]:
    """Build the HTTP middleware registered in main.py."""

    async def log_requests(request: Request, call_next: CallNext) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - start_time
            if should_log(500, skip_code_threshold):
                fields = collect_fields(request, 500, None, elapsed)
                logger.error(
                    format_request_line(fmt, fields),
                    extra={"path": request.url.path, "status_code": 500},
                )
            raise

        elapsed = time.perf_counter() - start_time
        if should_log(response.status_code, skip_code_threshold):
            fields = collect_fields(
                request, response.status_code,
                response.headers.get("content-length"), elapsed,
            )
            logger.info(
                format_request_line(fmt, fields),
                extra={
                    "path": request.url.path,
                    "status_code": response.status_code,
                },
            )
        return response

    return log_requests
