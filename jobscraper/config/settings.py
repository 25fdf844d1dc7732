from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the scraper.
    """

    # Credentials (required, never hard-coded)
    EMAIL: Optional[str] = None
    PASSWORD: Optional[str] = None

    # Search
    BASE_URL: str = "https://www.linkedin.com"
    SEARCH_KEYWORDS: str = "affiliate marketing"
    SEARCH_LOCATION: str = "Worldwide"
    SEARCH_LOCATION_ID: str = "OTHERS.worldwide"

    # Output
    OUTPUT_FILE: str = "linkedin_affiliate_marketing.csv"

    # Browser settings
    HEADLESS: bool = False
    VIEWPORT_WIDTH: int = 1903
    VIEWPORT_HEIGHT: int = 949
    IGNORE_HTTPS_ERRORS: bool = True

    # Timeouts
    NAVIGATION_TIMEOUT: int = 30000  # ms
    SELECTOR_TIMEOUT: int = 10000  # ms

    # Minimum delays between steps
    LOGIN_DELAY: int = 10000  # ms
    CAPTCHA_DELAY: int = 10000  # ms
    PAGE_SETTLE_DELAY: int = 20000  # ms
    DETAIL_DELAY: int = 15000  # ms

    # Auto-scroll
    SCROLL_STEP: int = 100  # px
    SCROLL_INTERVAL: int = 100  # ms
    SCROLL_MAX_STEPS: int = 500
    SCROLL_MAX_DURATION: float = 120.0  # seconds

    def missing_credentials(self) -> List[str]:
        return [name for name in ("EMAIL", "PASSWORD") if not getattr(self, name)]

    def require_credentials(self) -> None:
        """
        Fail fast when login credentials are not configured.
        """
        missing = self.missing_credentials()
        if missing:
            raise ValueError(
                f"{', '.join(missing)} not set in the environment variables."
            )


settings = Settings()
