from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from jobscraper.browser.launch import create_browser
from jobscraper.browser.manager import BrowserManager
from jobscraper.browser.scroll import auto_scroll
from jobscraper.browser.waits import settle
from jobscraper.config.settings import settings


def _page_with_heights(heights):
    """Mock page whose scrollHeight follows *heights*, repeating the last one."""
    readings = iter(heights)
    last = {"value": heights[-1]}

    async def evaluate(expression):
        if expression == "document.body.scrollHeight":
            last["value"] = next(readings, last["value"])
            return last["value"]
        return None

    page = MagicMock()
    page.evaluate = AsyncMock(side_effect=evaluate)
    page.wait_for_timeout = AsyncMock()
    return page


@pytest.mark.asyncio
async def test_auto_scroll_stops_at_bottom():
    page = _page_with_heights([500])

    ticks = await auto_scroll(page, step=100, interval=0, max_steps=50, max_duration=60)

    assert ticks == 5
    page.evaluate.assert_any_await("window.scrollBy(0, 100)")


@pytest.mark.asyncio
async def test_auto_scroll_follows_growing_content():
    page = _page_with_heights([300, 300, 800])

    ticks = await auto_scroll(page, step=100, interval=0, max_steps=50, max_duration=60)

    assert ticks == 8


@pytest.mark.asyncio
async def test_auto_scroll_bounded_by_max_steps():
    page = _page_with_heights([10**9])

    ticks = await auto_scroll(page, step=100, interval=0, max_steps=7, max_duration=60)

    assert ticks == 7


@pytest.mark.asyncio
async def test_auto_scroll_bounded_by_duration():
    page = _page_with_heights([10**9])

    ticks = await auto_scroll(
        page, step=100, interval=0, max_steps=10**6, max_duration=0.000001
    )

    assert ticks >= 1
    assert ticks < 10**6


@pytest.mark.asyncio
async def test_settle_reports_missing_selector():
    page = MagicMock()
    page.wait_for_selector = AsyncMock(side_effect=PlaywrightTimeoutError("timeout"))

    assert await settle(page, "#nope", min_delay=0, timeout=10) is False


@pytest.mark.asyncio
async def test_settle_found_selector():
    page = MagicMock()
    page.wait_for_selector = AsyncMock()

    assert await settle(page, "#here", min_delay=0, timeout=10) is True
    page.wait_for_selector.assert_awaited_once_with(
        "#here", state="attached", timeout=10
    )


@pytest.mark.asyncio
async def test_browser_session_yields_usable_page(page):
    await page.set_content("<p id='hello'>hi</p>")
    assert await page.inner_text("#hello") == "hi"
    assert page.viewport_size == {"width": 1903, "height": 949}


@pytest.mark.asyncio
async def test_auto_scroll_explicit_zero_bounds_are_honoured():
    page = _page_with_heights([10**9])

    assert await auto_scroll(page, step=100, interval=0, max_steps=0) == 1
    assert await auto_scroll(page, step=100, interval=0, max_duration=0) == 1


@pytest.mark.asyncio
async def test_create_browser_defaults_to_configured_headless():
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock()

    await create_browser(playwright)
    playwright.chromium.launch.assert_awaited_with(headless=settings.HEADLESS)

    await create_browser(playwright, headless=True)
    playwright.chromium.launch.assert_awaited_with(headless=True)


def test_browser_manager_exposes_page_only_through_initialize():
    manager = BrowserManager(headless=True)
    assert not hasattr(manager, "page")
