import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)
from jobscraper.browser.launch import create_browser
from jobscraper.browser.context import create_context

logger = logging.getLogger(__name__)


class BrowserManager:
    """
    Manages the lifecycle of the Playwright browser, context and the single
    page every step of the run navigates with.
    """

    def __init__(self, headless: Optional[bool] = None):
        self.headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def initialize(self) -> Page:
        """
        Starts Playwright, the browser, the context and the page if not already running.
        """
        if self._playwright is None:
            self._playwright = await async_playwright().start()
            logger.info("Playwright started.")

        if self._browser is None:
            self._browser = await create_browser(self._playwright, self.headless)

        if self._context is None:
            self._context = await create_context(self._browser)

        if self._page is None:
            self._page = await self._context.new_page()

        return self._page

    async def close(self):
        """
        Closes the page, context and browser and stops Playwright.
        Each step runs even if an earlier one failed.
        """
        if self._page:
            try:
                await self._page.close()
            except Exception as e:
                logger.debug(f"Error closing page: {e}")
            self._page = None

        if self._context:
            try:
                await self._context.close()
            except Exception as e:
                logger.debug(f"Error closing context: {e}")
            self._context = None
            logger.info("Browser context closed.")

        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.debug(f"Error closing browser: {e}")
            self._browser = None
            logger.info("Browser closed.")

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
            logger.info("Playwright stopped.")


@asynccontextmanager
async def browser_session(headless: Optional[bool] = None) -> AsyncIterator[Page]:
    """
    Scoped browser session. Yields the page and always releases the browser,
    including when the body raises.
    """
    manager = BrowserManager(headless=headless)
    try:
        page = await manager.initialize()
        yield page
    finally:
        await manager.close()
