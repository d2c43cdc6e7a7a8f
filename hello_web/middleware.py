"""
Request logging wrapper applied around the whole routing table.

One line per request: method, path and elapsed wall-clock time, written after
the wrapped application has finished with the request.
"""
import logging
import time

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger("hello_web.access")


def format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


class RequestLoggingMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        try:
            await self.app(scope, receive, send)
        finally:
            logger.info("%s %s %s", scope["method"], scope["path"], format_duration(time.perf_counter() - start))
