"""
Process entry point: configure logging, bind PORT and serve until terminated.

Usage: hello-web  (or python -m hello_web)
Exits 1 if the port is invalid or cannot be bound. There is no graceful
shutdown: SIGTERM/SIGINT keep their default behaviour and end the process
immediately.
"""
import contextlib
import logging
import sys

import uvicorn

from hello_web.core.config import Settings, get_settings
from hello_web.core.sentry import init_sentry
from hello_web.main import create_app
from hello_web.middleware import logger as access_logger
from hello_web.protocol import protocol_with_header_timeout

logger = logging.getLogger("hello_web.server")

STARTUP_FAILURE = 1

# uvicorn always arms a keep-alive timer; one year keeps idle connections open.
IDLE_TIMEOUT_DISABLED = 365 * 24 * 3600


class Server(uvicorn.Server):
    """uvicorn server that leaves process signals alone."""

    @contextlib.contextmanager
    def capture_signals(self):
        yield


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # request lines are written whatever LOG_LEVEL says
    access_logger.setLevel(logging.INFO)


def parse_port(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"port must be a decimal number: {value!r}")
    port = int(value)
    if port > 65535:
        raise ValueError(f"port out of range: {port}")
    return port


def build_server(settings: Settings) -> Server:
    """Build the uvicorn server; raises ValueError on an unusable PORT."""
    config = uvicorn.Config(
        app=create_app(settings),
        host=settings.HOST or None,
        port=parse_port(settings.PORT),
        http=protocol_with_header_timeout(settings.READ_HEADER_TIMEOUT_SECONDS),
        timeout_keep_alive=IDLE_TIMEOUT_DISABLED,
        lifespan="on",
        access_log=False,
        log_config=None,  # keep the root handler set up by configure_logging
    )
    return Server(config)


def run_server(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings)
    init_sentry(settings)

    logger.info(
        "hello-web starting on :%s (version=%s sha=%s buildTime=%s)",
        settings.PORT,
        settings.APP_VERSION,
        settings.GIT_SHA,
        settings.BUILD_TIME,
    )
    try:
        server = build_server(settings)
    except ValueError as exc:
        logger.error("Invalid PORT %r: %s", settings.PORT, exc)
        sys.exit(STARTUP_FAILURE)

    try:
        server.run()
    except SystemExit:
        # uvicorn exits on bind errors after logging the OSError
        logger.error("hello-web could not listen on %s:%s", settings.HOST, settings.PORT)
        raise
    except Exception:
        logger.exception("hello-web stopped serving")
        sys.exit(STARTUP_FAILURE)

    if not server.started:
        logger.error("hello-web could not listen on %s:%s", settings.HOST, settings.PORT)
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    run_server()
