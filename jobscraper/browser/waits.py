"""
Page readiness helpers.

Replaces blind sleeps with "wait for a selector, but never less than a
minimum delay". The minimum delay keeps the pacing slow enough to not look
like a script; the selector wait makes the step finish as soon as the
content is there.
"""

import asyncio
import logging
import time
from typing import Optional

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from jobscraper.config.settings import settings

logger = logging.getLogger(__name__)


async def settle(
    page: Page,
    selector: Optional[str] = None,
    min_delay: int = 0,
    timeout: Optional[int] = None,
) -> bool:
    """
    Wait for *selector* to be attached, bounded by *timeout* (ms), then pad
    the wait up to *min_delay* ms in total.

    Returns False when the selector did not show up in time. A timeout is
    logged and swallowed; callers decide what a missing element means.
    """
    if timeout is None:
        timeout = settings.SELECTOR_TIMEOUT

    started = time.monotonic()
    found = True

    if selector:
        try:
            await page.wait_for_selector(selector, state="attached", timeout=timeout)
        except PlaywrightTimeoutError:
            logger.warning(f"Timed out after {timeout}ms waiting for '{selector}'")
            found = False

    elapsed_ms = (time.monotonic() - started) * 1000
    remaining = min_delay - elapsed_ms
    if remaining > 0:
        await asyncio.sleep(remaining / 1000)

    return found
