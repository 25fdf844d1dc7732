"""
Browser Launch Module

Starts the Chromium instance used for the whole scraping session.
"""

import logging
from typing import Optional

from playwright.async_api import Browser, Playwright

from jobscraper.config.settings import settings

logger = logging.getLogger(__name__)


async def create_browser(playwright: Playwright, headless: Optional[bool] = None) -> Browser:
    """
    Launch a Chromium browser instance.

    Args:
        playwright: Playwright instance
        headless: Overrides settings.HEADLESS when given

    Returns:
        Browser instance
    """
    if headless is None:
        headless = settings.HEADLESS

    browser = await playwright.chromium.launch(headless=headless)

    logger.info(f"Browser launched (Chromium, Headless: {headless})")
    return browser
