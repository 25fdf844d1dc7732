import logging
from pathlib import Path

from jobscraper.config.settings import Settings, settings as default_settings
from jobscraper.browser.manager import browser_session
from jobscraper.core.export import export_csv
from jobscraper.linkedin.adapter import LinkedInAdapter

logger = logging.getLogger(__name__)


class Runner:
    """
    Orchestrates the run: login, discovery, detail scraping, export.
    """

    def __init__(self, settings: Settings = None):
        self.settings = settings or default_settings

    async def run(self) -> Path:
        """
        Run the whole pipeline and return the path of the written CSV.
        Fatal errors are logged and re-raised; the browser is closed either way.
        """
        cfg = self.settings
        cfg.require_credentials()

        try:
            async with browser_session(headless=cfg.HEADLESS) as page:
                adapter = LinkedInAdapter(
                    page,
                    keywords=cfg.SEARCH_KEYWORDS,
                    location=cfg.SEARCH_LOCATION,
                    location_id=cfg.SEARCH_LOCATION_ID,
                    base_url=cfg.BASE_URL,
                )

                await adapter.authenticate(cfg.EMAIL, cfg.PASSWORD)

                job_urls = await adapter.discover_jobs()
                logger.info(f"Discovered {len(job_urls)} jobs.")

                jobs = await adapter.scrape_jobs(job_urls)
                logger.info(f"Successfully scraped {len(jobs)} jobs.")

                return export_csv(jobs, cfg.OUTPUT_FILE)

        except Exception as e:
            logger.exception(f"Runner failed: {e}")
            raise


runner = Runner()
