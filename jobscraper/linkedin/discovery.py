"""
Job link discovery from LinkedIn SERP pages.
Handles login-state detection, scrolling, link collection and pagination.
"""

import logging
from typing import List, Optional

from playwright.async_api import Page

from jobscraper.config.settings import settings
from jobscraper.browser.scroll import auto_scroll
from jobscraper.browser.waits import settle
from jobscraper.linkedin.auth import is_logged_in
from jobscraper.linkedin.pagination import go_to_next_page
from jobscraper.linkedin.selectors import JOB_LINK

logger = logging.getLogger(__name__)


async def collect_links(page: Page, logged_in: bool) -> List[str]:
    """
    Return the href of every job link on the current SERP, in page order.
    No match means an empty list.
    """
    selector = JOB_LINK.pick(logged_in)
    links = await page.eval_on_selector_all(
        selector, "links => links.map(link => link.href)"
    )
    if not links:
        logger.warning(f"No job links matched '{selector}'")
    return [link for link in links if link]


async def discover_job_links(
    page: Page, number_of_pages: int, settle_delay: Optional[int] = None
) -> List[str]:
    """
    Walk *number_of_pages* SERP pages starting from the current one and
    collect job detail URLs. Duplicates are kept; pages are not retried.
    """
    if settle_delay is None:
        settle_delay = settings.PAGE_SETTLE_DELAY

    job_urls: List[str] = []

    for page_num in range(number_of_pages):
        logged_in = await is_logged_in(page)
        logger.info(
            f"SERP page {page_num + 1}/{number_of_pages} (logged in: {logged_in})"
        )

        await auto_scroll(page)
        await settle(page, JOB_LINK.pick(logged_in), min_delay=settle_delay)

        current_page_urls = await collect_links(page, logged_in)
        job_urls.extend(current_page_urls)
        logger.info(
            f"Collected {len(current_page_urls)} links (total {len(job_urls)})"
        )

        if page_num < number_of_pages - 1:
            await go_to_next_page(page, logged_in)

    logger.info(f"Discovery complete: {len(job_urls)} job links found")
    return job_urls
