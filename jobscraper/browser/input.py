"""
Keyboard input for Playwright pages.
"""

import logging

from playwright.async_api import Page

logger = logging.getLogger(__name__)


async def type_into(page: Page, selector: str, text: str, delay: int = 50) -> None:
    """
    Focus the input identified by *selector* and type *text* key by key.

    Raises if the element is not on the page.
    """
    await page.focus(selector)
    logger.debug("Typing %d characters into '%s'", len(text), selector)
    await page.keyboard.type(text, delay=delay)
