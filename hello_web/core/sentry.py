"""
Sentry initialization helper. Reads SENTRY_DSN from env via Settings.
"""
import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from hello_web.core.config import Settings

logger = logging.getLogger("hello_web.core.sentry")


def init_sentry(settings: Settings) -> bool:
    """Return True when error reporting was switched on."""
    dsn = settings.SENTRY_DSN
    if not dsn:
        return False
    sentry_logging = LoggingIntegration(
        level=None,  # no breadcrumbs from plain log records
        event_level=logging.ERROR,  # fatal startup errors become events
    )
    sentry_sdk.init(
        dsn,
        integrations=[sentry_logging],
        traces_sample_rate=0.0,
        release=settings.APP_VERSION,
    )
    logger.info("Sentry error reporting enabled (release=%s)", settings.APP_VERSION)
    return True
