import pytest
import pytest_asyncio

from jobscraper.browser.manager import browser_session
from jobscraper.core.models import JobRecord


@pytest_asyncio.fixture
async def page():
    """A real headless Chromium page; skips when no browser is installed."""
    session = browser_session(headless=True)
    try:
        page = await session.__aenter__()
    except Exception as e:
        pytest.skip(f"Chromium not available: {e}")
    try:
        yield page
    finally:
        await session.__aexit__(None, None, None)


async def _serve(page, url: str, html: str) -> None:
    """Answer requests for *url* with *html* instead of hitting the network."""

    async def handler(route):
        await route.fulfill(status=200, content_type="text/html", body=html)

    await page.route(url, handler)


@pytest.fixture
def full_record():
    return JobRecord(
        title="Affiliate Marketing Manager",
        company="Acme, Inc.",
        location="Berlin, Germany",
        datePosted="2 days ago",
        description='Grow our partner network.\nWork with "top" publishers.',
        seniorityLevel="Mid-Senior level",
        industries="Marketing, Sales",
        employmentType="Full-time",
        jobFunctions="Marketing",
    )


@pytest.fixture
def serve():
    return _serve
