"""
elpais_opinion/config.py
------------------------
Central configuration for the El País Opinion scraper.
Edit this file to adjust behaviour without touching the source code.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()

# ── URLs ─────────────────────────────────────────────────────────────────────
HOME_URL     = "https://elpais.com/"
OPINION_PATH = "/opinion"
OPINION_URL  = "https://elpais.com/opinion/"

# ── Scraping ─────────────────────────────────────────────────────────────────
NUM_ARTICLES = 5          # Number of Opinion articles to scrape
LANGUAGE     = "es"       # Locale sent to the browser
NO_CONTENT   = "No content available"

# ── Output ───────────────────────────────────────────────────────────────────
# Relative to the working directory; created on first download.
IMAGES_DIR = Path("images")

# ── Browser / Timeouts ───────────────────────────────────────────────────────
PAGE_LOAD_TIMEOUT = 30    # seconds before driver.get() gives up
ELEMENT_WAIT      = 10    # seconds for explicit element waits
CONSENT_WAIT      = 5     # seconds to wait for the cookie banner
WINDOW_SIZE       = (1280, 900)

# ── HTTP ─────────────────────────────────────────────────────────────────────
CONNECT_TIMEOUT = 5       # seconds
READ_TIMEOUT    = 10      # seconds
HTTP_TIMEOUT    = 30      # seconds, shared client timeout for the free endpoint
USER_AGENT      = "Mozilla/5.0 (compatible; ElPaisOpinionScraper/1.0)"

# ── Translation ──────────────────────────────────────────────────────────────
TRANSLATION_SOURCE = "es"
TRANSLATION_TARGET = "en"
TRANSLATION_DELAY  = 0.5  # seconds between headlines, be polite to the APIs

RAPIDAPI_KEY  = os.getenv("RAPIDAPI_KEY", "").strip()
RAPIDAPI_HOST = "google-translate1.p.rapidapi.com"
RAPIDAPI_URL  = f"https://{RAPIDAPI_HOST}/language/translate/v2"
FREE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"

# ── Word-frequency analysis ──────────────────────────────────────────────────
MIN_WORD_LENGTH  = 3      # shorter tokens are discarded
# Report words that appear STRICTLY MORE THAN this many times
REPEAT_THRESHOLD = 2

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── BrowserStack ─────────────────────────────────────────────────────────────
BS_HUB_URL  = "https://hub-cloud.browserstack.com/wd/hub"
BS_PROJECT  = "ElPais Scraper"
BS_BUILD    = "elpais-opinion-scrape"
BS_USERNAME_VAR   = "BROWSERSTACK_USERNAME"
BS_ACCESS_KEY_VAR = "BROWSERSTACK_ACCESS_KEY"


@dataclass(frozen=True)
class GridCredentials:
    username: str
    access_key: str = field(repr=False)


@dataclass(frozen=True)
class GridTarget:
    """One browser/device combination on the remote grid."""

    browser_name: str = "Chrome"
    browser_version: str | None = None
    os: str | None = None
    os_version: str | None = None
    device_name: str | None = None
    real_mobile: bool = False
    session_name: str | None = None

    @property
    def label(self) -> str:
        if self.session_name:
            return self.session_name
        where = self.device_name or " ".join(p for p in (self.os, self.os_version) if p)
        return f"{self.browser_name} {where}".strip()


def grid_credentials() -> GridCredentials:
    """Read BrowserStack credentials from the environment.

    Raises ConfigurationError if either variable is missing or blank.
    """
    username   = os.getenv(BS_USERNAME_VAR, "").strip()
    access_key = os.getenv(BS_ACCESS_KEY_VAR, "").strip()
    missing = [
        name for name, value in ((BS_USERNAME_VAR, username), (BS_ACCESS_KEY_VAR, access_key))
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"{' and '.join(missing)} must be set to run on BrowserStack."
        )
    return GridCredentials(username=username, access_key=access_key)


# 5 browser/device combinations (3 desktop + 2 real mobile)
GRID_TARGETS = [
    GridTarget("Chrome",  "latest", os="Windows", os_version="11",
               session_name="Chrome Win11"),
    GridTarget("Firefox", "latest", os="Windows", os_version="10",
               session_name="Firefox Win10"),
    GridTarget("Safari",  "latest", os="OS X",    os_version="Ventura",
               session_name="Safari macOS Ventura"),
    GridTarget("Chrome",  device_name="Samsung Galaxy S23", os_version="13.0",
               real_mobile=True, session_name="Galaxy S23 Chrome"),
    GridTarget("Safari",  device_name="iPhone 14", os_version="16",
               real_mobile=True, session_name="iPhone 14 Safari"),
]
