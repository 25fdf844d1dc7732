"""
Auto-scroll to force lazily rendered content into the DOM.
"""

import logging
import time
from typing import Optional

from playwright.async_api import Page

from jobscraper.config.settings import settings

logger = logging.getLogger(__name__)


async def auto_scroll(
    page: Page,
    step: Optional[int] = None,
    interval: Optional[int] = None,
    max_steps: Optional[int] = None,
    max_duration: Optional[float] = None,
) -> int:
    """
    Scroll down by *step* px every *interval* ms until the distance scrolled
    reaches the page height. The height is re-read on every tick so content
    appended while scrolling is accounted for.

    Stops early after *max_steps* ticks or *max_duration* seconds; hitting a
    bound is logged and the caller proceeds with whatever loaded.

    Returns the number of ticks performed.
    """
    step = settings.SCROLL_STEP if step is None else step
    interval = settings.SCROLL_INTERVAL if interval is None else interval
    max_steps = settings.SCROLL_MAX_STEPS if max_steps is None else max_steps
    max_duration = (
        settings.SCROLL_MAX_DURATION if max_duration is None else max_duration
    )

    started = time.monotonic()
    total_height = 0
    ticks = 0

    while True:
        scroll_height = await page.evaluate("document.body.scrollHeight")
        await page.evaluate(f"window.scrollBy(0, {step})")
        total_height += step
        ticks += 1

        if total_height >= scroll_height:
            logger.debug(f"Reached bottom after {ticks} scrolls ({scroll_height}px)")
            break

        if ticks >= max_steps:
            logger.warning(
                f"Stopped scrolling after {ticks} steps (height {scroll_height}px)"
            )
            break

        if time.monotonic() - started >= max_duration:
            logger.warning(
                f"Stopped scrolling after {max_duration}s (height {scroll_height}px)"
            )
            break

        await page.wait_for_timeout(interval)

    return ticks
