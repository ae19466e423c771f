"""
elpais_opinion/browser.py
-------------------------
BrowserSession - owns the WebDriver for the navigation and extraction
stages and is released as soon as extraction is done, so a remote
BrowserStack session never sits idle while images and translations run.

Two ways to build one:
    BrowserSession.local(headless=True)         # Chrome on this machine
    BrowserSession.remote(target)               # BrowserStack grid
"""
import json

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.safari.options import Options as SafariOptions

from . import config
from .config import GridCredentials, GridTarget
from .errors import SessionReleasedError
from .log import get_logger
from .page import ElPaisPage

logger = get_logger(__name__)

_OPTIONS_BY_BROWSER = {
    "chrome":  ChromeOptions,
    "firefox": FirefoxOptions,
    "safari":  SafariOptions,
    "edge":    EdgeOptions,
}


def build_local_options(headless: bool = True) -> ChromeOptions:
    """Spanish-locale Chrome options for running on this machine."""
    opts = ChromeOptions()
    opts.page_load_strategy = "eager"          # don't wait for ads/images
    if headless:
        opts.add_argument("--headless=new")
    opts.add_argument("--no-sandbox")
    opts.add_argument("--disable-dev-shm-usage")
    opts.add_argument("--remote-allow-origins=*")
    opts.add_argument(f"--lang={config.LANGUAGE}")
    opts.add_argument(f"--window-size={config.WINDOW_SIZE[0]},{config.WINDOW_SIZE[1]}")
    opts.add_experimental_option("prefs", {"intl.accept_languages": "es,es-ES"})
    return opts


def build_remote_options(target: GridTarget, credentials: GridCredentials):
    """
    Convert a GridTarget into the matching WebDriver Options object.
    BrowserStack W3C format: vendor settings go under "bstack:options".
    """
    opts = _OPTIONS_BY_BROWSER.get(target.browser_name.lower(), ChromeOptions)()
    opts.page_load_strategy = "eager"

    bs_opts = {
        "userName":    credentials.username,
        "accessKey":   credentials.access_key,
        "projectName": config.BS_PROJECT,
        "buildName":   config.BS_BUILD,
        "sessionName": target.label,
    }
    if target.device_name:
        bs_opts["deviceName"] = target.device_name
        if target.real_mobile:
            bs_opts["realMobile"] = "true"
    if target.os:
        bs_opts["os"] = target.os
    if target.os_version:
        bs_opts["osVersion"] = target.os_version

    opts.set_capability("browserName", target.browser_name)
    if target.browser_version:
        opts.browser_version = target.browser_version
    opts.set_capability("bstack:options", bs_opts)
    return opts


class BrowserSession:
    """Exclusive owner of one WebDriver, released exactly once."""

    def __init__(self, driver: WebDriver, label: str = "local", remote: bool = False, page: ElPaisPage | None = None):
        self.label  = label
        self.remote = remote
        self._driver: WebDriver | None = driver
        self._page = page or ElPaisPage(driver)
        try:
            driver.set_page_load_timeout(config.PAGE_LOAD_TIMEOUT)
        except WebDriverException:
            driver.quit()
            raise
        try:
            driver.maximize_window()
        except WebDriverException as exc:
            logger.info("Could not maximize window (likely mobile device): %s", exc.msg)

    @classmethod
    def local(cls, headless: bool = True) -> "BrowserSession":
        driver = webdriver.Chrome(options=build_local_options(headless))
        return cls(driver, label="Chrome (local)")

    @classmethod
    def remote(cls, target: GridTarget, credentials: GridCredentials | None = None) -> "BrowserSession":
        # Credentials are resolved before anything touches the network.
        credentials = credentials or config.grid_credentials()
        options = build_remote_options(target, credentials)
        driver = webdriver.Remote(command_executor=config.BS_HUB_URL, options=options)
        return cls(driver, label=target.label, remote=True)

    # ── Collaborator API ──────────────────────────────────────────────────────

    @property
    def released(self) -> bool:
        return self._driver is None

    def load_homepage(self) -> None:
        self._require_driver()
        self._page.load_homepage()

    def navigate_to_opinion_section(self) -> str:
        self._require_driver()
        return self._page.navigate_to_opinion_section()

    def get_loaded_document(self) -> WebDriver:
        return self._require_driver()

    def release(self, passed: bool = True, reason: str = "") -> None:
        """Quit the driver. Remote sessions get their pass/fail status first."""
        if self._driver is None:
            logger.debug("Session %s already released", self.label)
            return
        driver, self._driver = self._driver, None
        try:
            if self.remote:
                self._mark_status(driver, passed, reason)
        finally:
            driver.quit()
        logger.info("Released browser session %s", self.label)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _require_driver(self) -> WebDriver:
        if self._driver is None:
            raise SessionReleasedError(f"Browser session {self.label} has already been released.")
        return self._driver

    @staticmethod
    def _mark_status(driver: WebDriver, passed: bool, reason: str) -> None:
        status = "passed" if passed else "failed"
        script = json.dumps({
            "action": "setSessionStatus",
            "arguments": {"status": status, "reason": reason or f"Opinion scrape {status}"},
        })
        try:
            driver.execute_script(f"browserstack_executor: {script}")
        except WebDriverException as exc:
            logger.warning("Could not report session status to BrowserStack: %s", exc.msg)
