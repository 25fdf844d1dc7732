"""
Job detail page scraping.
Handles navigating to individual job pages and reading their fields.
"""

import logging
from typing import Dict, Optional

from playwright.async_api import Page

from jobscraper.config.settings import settings
from jobscraper.core.models import JobRecord
from jobscraper.browser.scroll import auto_scroll
from jobscraper.browser.waits import settle
from jobscraper.linkedin.extraction.fields import read_text, read_list
from jobscraper.linkedin.selectors import (
    DETAIL_FIELDS,
    LIST_FIELDS,
    VIEW_MORE_SELECTOR,
    resolve,
)

logger = logging.getLogger(__name__)


async def extract_job(page: Page, logged_in: bool) -> JobRecord:
    """
    Read every detail field from an already-loaded job page.
    Missing fields become "" and are logged.
    """
    selectors: Dict[str, str] = resolve(DETAIL_FIELDS, logged_in)
    values: Dict[str, str] = {}

    for field_name, selector in selectors.items():
        if field_name in LIST_FIELDS:
            value = await read_list(page, selector)
        else:
            value = await read_text(page, selector)

        if not value:
            logger.warning(f"Field '{field_name}' empty (selector '{selector}')")
        values[field_name] = value

    return JobRecord(**values)


async def scrape_job(
    page: Page, url: str, logged_in: bool, delay: Optional[int] = None
) -> JobRecord:
    """
    Navigate to *url*, expand the description, scroll, then extract.
    Navigation errors propagate; there is no retry.
    """
    if delay is None:
        delay = settings.DETAIL_DELAY

    logger.info(f"Scraping job: {url}")
    await page.goto(url, wait_until="domcontentloaded")

    title_selector = DETAIL_FIELDS["title"].pick(logged_in)
    await settle(page, title_selector, min_delay=delay)

    view_more = page.locator(VIEW_MORE_SELECTOR)
    if await view_more.count() > 0:
        await view_more.first.click()
        await settle(page, min_delay=delay)
    else:
        logger.debug("No 'view more' control on page")

    await auto_scroll(page)

    job = await extract_job(page, logged_in)
    logger.info(f"✓ Scraped: {job.title or url} at {job.company or 'unknown company'}")
    return job
