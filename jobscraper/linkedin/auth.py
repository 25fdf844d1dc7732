"""
Sign-in to LinkedIn and login-state detection.
"""

import logging
from playwright.async_api import Page

from jobscraper.config.settings import settings
from jobscraper.browser.input import type_into
from jobscraper.browser.waits import settle
from jobscraper.linkedin.selectors import (
    EMAIL_INPUT_SELECTOR,
    PASSWORD_INPUT_SELECTOR,
    LOGIN_SUBMIT_SELECTOR,
    CAPTCHA_CHECKBOX_SELECTOR,
    PROFILE_PHOTO_SELECTOR,
)

logger = logging.getLogger(__name__)


async def login(page: Page, url: str, email: str, password: str) -> None:
    """
    Fill in and submit the login form at *url*.

    No retry: a missing submit control raises RuntimeError, navigation
    errors propagate.
    """
    logger.info(f"Navigating to login page: {url}")
    await page.goto(url, wait_until="domcontentloaded")
    await page.set_viewport_size(
        {"width": settings.VIEWPORT_WIDTH, "height": settings.VIEWPORT_HEIGHT}
    )
    await settle(page, EMAIL_INPUT_SELECTOR, min_delay=1000)

    await type_into(page, EMAIL_INPUT_SELECTOR, email)
    await type_into(page, PASSWORD_INPUT_SELECTOR, password)

    submit = page.locator(LOGIN_SUBMIT_SELECTOR)
    if await submit.count() == 0:
        raise RuntimeError(
            f"Login submit control '{LOGIN_SUBMIT_SELECTOR}' not found on {url}"
        )

    await submit.first.click()
    logger.info("Login form submitted")


async def handle_captcha(page: Page) -> bool:
    """
    Tick the reCAPTCHA checkbox if one is shown.

    Best effort only: image challenges are not solved and nothing verifies
    that the click got the session through.
    """
    checkbox = page.locator(CAPTCHA_CHECKBOX_SELECTOR)
    if await checkbox.count() == 0:
        logger.info("No CAPTCHA checkbox found")
        return False

    logger.warning("CAPTCHA checkbox detected, clicking it")
    await checkbox.first.click()
    return True


async def is_logged_in(page: Page) -> bool:
    """
    LinkedIn may sign a suspected bot out at any time, so check before
    every page that depends on the markup variant.
    """
    return await page.locator(PROFILE_PHOTO_SELECTOR).count() > 0
