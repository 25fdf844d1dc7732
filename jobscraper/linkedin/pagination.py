"""
Pagination logic for LinkedIn SERP navigation.
"""

import logging
import math
import re
import urllib.parse

from playwright.async_api import Page

from jobscraper.linkedin.config import SEARCH_PATH, JOBS_PER_PAGE
from jobscraper.linkedin.selectors import RESULTS_COUNT_SELECTOR, NEXT_PAGE

logger = logging.getLogger(__name__)


def compute_page_count(results_text: str, page_size: int = JOBS_PER_PAGE) -> int:
    """
    Turn a results-count string like "Showing 1,234 results" into the number
    of SERP pages. Every non-digit character is ignored; no digits means 0.
    """
    digits = re.sub(r"\D", "", results_text or "")
    if not digits:
        return 0
    return math.ceil(int(digits) / page_size)


def build_search_url(
    base_url: str, keywords: str, location: str, location_id: str
) -> str:
    """
    Build a LinkedIn job search URL.
    """
    params = {
        "keywords": keywords,
        "location": location,
        "locationId": location_id,
    }
    query = urllib.parse.urlencode(params, quote_via=urllib.parse.quote)
    return f"{base_url.rstrip('/')}{SEARCH_PATH}?{query}"


async def get_number_of_pages(page: Page, page_size: int = JOBS_PER_PAGE) -> int:
    """
    Read the results-count element and compute the page count.
    """
    count = page.locator(RESULTS_COUNT_SELECTOR)
    if await count.count() == 0:
        logger.warning(f"Results count '{RESULTS_COUNT_SELECTOR}' not found")
        return 0

    text = await count.first.inner_text()
    pages = compute_page_count(text, page_size)
    logger.info(f"Results count '{text.strip()}' -> {pages} pages")
    return pages


async def go_to_next_page(page: Page, logged_in: bool) -> bool:
    """
    Click the "next page" control for the current markup variant.
    A missing control is not an error.
    """
    selector = NEXT_PAGE.pick(logged_in)
    next_button = page.locator(selector)
    if await next_button.count() == 0:
        logger.warning(f"Next page control '{selector}' not found")
        return False

    await next_button.first.click()
    return True
