"""
Browser Context Factory

One context per run: the login cookies live here and are reused by every
navigation that follows.
"""

import logging
from playwright.async_api import Browser, BrowserContext

from jobscraper.config.settings import settings

logger = logging.getLogger(__name__)


async def create_context(browser: Browser) -> BrowserContext:
    """
    Create a browser context with the configured viewport and locale.

    Args:
        browser: Browser instance

    Returns:
        BrowserContext instance
    """
    context = await browser.new_context(
        viewport={"width": settings.VIEWPORT_WIDTH, "height": settings.VIEWPORT_HEIGHT},
        locale="en-US",
        ignore_https_errors=settings.IGNORE_HTTPS_ERRORS,
    )
    context.set_default_navigation_timeout(settings.NAVIGATION_TIMEOUT)
    context.set_default_timeout(settings.SELECTOR_TIMEOUT)

    logger.info(
        f"Browser context created ({settings.VIEWPORT_WIDTH}x{settings.VIEWPORT_HEIGHT})"
    )
    return context
