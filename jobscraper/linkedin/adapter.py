"""
LinkedInAdapter - scraper for LinkedIn job search.

Delegates all work to submodules:
- auth.py for sign-in and login-state detection
- discovery.py for job URL discovery from SERP
- scraping.py for individual job detail extraction
"""

import logging
from typing import List

from playwright.async_api import Page

from jobscraper.config.settings import settings
from jobscraper.core.models import JobRecord
from jobscraper.browser.waits import settle
from jobscraper.linkedin.config import LOGIN_PATH
from jobscraper.linkedin import auth as auth_module
from jobscraper.linkedin import discovery as discovery_module
from jobscraper.linkedin import scraping as scraping_module
from jobscraper.linkedin.pagination import build_search_url, get_number_of_pages
from jobscraper.linkedin.selectors import RESULTS_COUNT_SELECTOR

logger = logging.getLogger(__name__)


class LinkedInAdapter:
    """
    Sequential LinkedIn scraper bound to one browser page.
    """

    def __init__(
        self,
        page: Page,
        keywords: str = "affiliate marketing",
        location: str = "Worldwide",
        location_id: str = "OTHERS.worldwide",
        base_url: str = "https://www.linkedin.com",
    ):
        self.page = page
        self.keywords = keywords
        self.location = location
        self.location_id = location_id
        self.base_url = base_url.rstrip("/")

    @property
    def search_url(self) -> str:
        return build_search_url(
            self.base_url, self.keywords, self.location, self.location_id
        )

    async def authenticate(self, email: str, password: str) -> None:
        """
        Sign in, then give the best-effort CAPTCHA click a chance.
        """
        await auth_module.login(
            self.page, f"{self.base_url}{LOGIN_PATH}", email, password
        )
        await settle(self.page, min_delay=settings.LOGIN_DELAY)
        await auth_module.handle_captcha(self.page)
        await settle(self.page, min_delay=settings.CAPTCHA_DELAY)

        if not await auth_module.is_logged_in(self.page):
            logger.warning("Profile photo not found after login; continuing signed out")

    async def discover_jobs(self) -> List[str]:
        """
        Open the search results and collect job URLs from every page.
        """
        logger.info(
            f"Starting discovery (Keywords: {self.keywords}, Location: {self.location})"
        )
        await self.page.goto(self.search_url, wait_until="domcontentloaded")
        await settle(self.page, RESULTS_COUNT_SELECTOR)

        number_of_pages = await get_number_of_pages(self.page)
        return await discovery_module.discover_job_links(self.page, number_of_pages)

    async def scrape_job(self, url: str) -> JobRecord:
        """
        Scrape a single job detail page with the selectors for the current
        login state.
        """
        logged_in = await auth_module.is_logged_in(self.page)
        return await scraping_module.scrape_job(self.page, url, logged_in)

    async def scrape_jobs(self, job_urls: List[str]) -> List[JobRecord]:
        """
        Visit every URL in order, one at a time.
        """
        jobs: List[JobRecord] = []
        total = len(job_urls)
        for index, url in enumerate(job_urls, 1):
            logger.info(f"Job {index}/{total}")
            jobs.append(await self.scrape_job(url))
        return jobs
