import logging

from fastapi import FastAPI

from hello_web.api import greeting, health
from hello_web.core.config import Settings, get_settings
from hello_web.middleware import RequestLoggingMiddleware
from hello_web.models import BuildInfo

logger = logging.getLogger("hello_web")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="hello-web",
        version=settings.APP_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.build_info = BuildInfo.from_settings(settings)

    app.include_router(health.router)
    # greeting owns the catch-all route, keep it last
    app.include_router(greeting.router)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting hello-web application (version=%s)", settings.APP_VERSION)

    # Wraps the full routing table, not individual handlers.
    app.add_middleware(RequestLoggingMiddleware)
    return app
