"""
elpais_opinion/page.py
----------------------
ElPaisPage - drives the homepage and gets the browser onto the Opinion
section.

Navigation tries, in order:
  1. the Opinion link in the section nav menu
  2. any link whose text is exactly "Opinión"
  3. a direct driver.get() to OPINION_URL (assumed to always work; if it
     does not, extraction will fail to find any article)
"""
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from . import config
from .log import get_logger

logger = get_logger(__name__)

NAV_MENU  = "nav-menu"
LINK_TEXT = "link-text"
DIRECT    = "direct-url"

OPINION_LINK_STRATEGIES = [
    (NAV_MENU,  (By.CSS_SELECTOR, "nav.cs_m a[href*='/opinion']")),
    (LINK_TEXT, (By.XPATH, "//a[contains(@href, '/opinion') and text()='Opinión']")),
]

CONSENT_SELECTORS = [
    (By.ID,           "didomi-notice-agree-button"),
    (By.XPATH,        "//button[contains(translate(text(),'ACEPTAR','aceptar'),'aceptar')]"),
    (By.CSS_SELECTOR, "[data-testid='accept-button']"),
]


class ElPaisPage:
    """Page object for elpais.com navigation."""

    def __init__(
        self,
        driver: WebDriver,
        timeout: float = config.ELEMENT_WAIT,
        consent_timeout: float = config.CONSENT_WAIT,
    ):
        self.driver = driver
        self.timeout = timeout
        self.consent_timeout = consent_timeout
        self.navigation_strategy: str | None = None

    # ── Homepage ──────────────────────────────────────────────────────────────

    def load_homepage(self) -> None:
        print(f"\n  Navigating → {config.HOME_URL}")
        self.driver.get(config.HOME_URL)
        self.dismiss_consent()
        print(f"  Page title : {self.driver.title}")
        print(f"  Page lang  : {self.page_language() or '(unknown)'}")

    def page_language(self) -> str | None:
        """The <html lang> attribute; elpais.com serves Spanish ("es") by default."""
        try:
            return self.driver.find_element(By.TAG_NAME, "html").get_attribute("lang")
        except WebDriverException:
            return None

    def dismiss_consent(self) -> bool:
        """Click the GDPR consent button if it shows up within the short wait."""
        try:
            btn = WebDriverWait(self.driver, self.consent_timeout).until(
                EC.any_of(*(EC.element_to_be_clickable(loc) for loc in CONSENT_SELECTORS))
            )
            btn.click()
        except (TimeoutException, WebDriverException):
            print("  Cookie banner not found or skipped.")
            return False
        print("  Accepted cookies.")
        return True

    # ── Opinion section ───────────────────────────────────────────────────────

    def navigate_to_opinion_section(self) -> str:
        """Reach the Opinion section; returns the name of the strategy that worked."""
        for name, locator in OPINION_LINK_STRATEGIES:
            if self._click_through(locator):
                self.navigation_strategy = name
                break
            logger.info("Opinion navigation via %s failed, trying next strategy", name)
        else:
            logger.info("Forcing direct URL navigation to %s", config.OPINION_URL)
            self.driver.get(config.OPINION_URL)
            self.navigation_strategy = DIRECT

        print(f"  Opinion section reached via {self.navigation_strategy}: {self.driver.current_url}")
        return self.navigation_strategy

    def _click_through(self, locator) -> bool:
        wait = WebDriverWait(self.driver, self.timeout)
        try:
            wait.until(EC.element_to_be_clickable(locator)).click()
            wait.until(EC.url_contains(config.OPINION_PATH))
        except (TimeoutException, WebDriverException) as exc:
            logger.debug("Locator %s did not lead to the Opinion section: %s", locator, exc)
            return False
        return True
