"""
elpais_opinion/extractor.py
---------------------------
ArticleExtractor - reads Opinion cards off an already loaded section page.

Per card:
  - no title  -> the whole card is skipped (it is not an article)
  - no body   -> NO_CONTENT placeholder
  - no image  -> image_url is None
A card that blows up for any other reason is logged and skipped.
"""
from selenium.common.exceptions import NoSuchElementException, TimeoutException, WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from . import config
from .errors import ElementsNotFoundError
from .log import get_logger
from .models import Article

logger = get_logger(__name__)

Locator = tuple[str, str]

ARTICLE_LOCATOR: Locator = (By.TAG_NAME, "article")
TITLE_LOCATOR:   Locator = (By.CSS_SELECTOR, "h2.c_t")
CONTENT_LOCATOR: Locator = (By.CSS_SELECTOR, "p.c_d")
IMAGE_LOCATOR:   Locator = (By.TAG_NAME, "img")


class ArticleExtractor:
    """Extracts title, body snippet and image URL from each article card."""

    def __init__(
        self,
        article_locator: Locator = ARTICLE_LOCATOR,
        title_locator: Locator = TITLE_LOCATOR,
        content_locator: Locator = CONTENT_LOCATOR,
        image_locator: Locator = IMAGE_LOCATOR,
        timeout: float = config.ELEMENT_WAIT,
    ):
        self.article_locator = article_locator
        self.title_locator   = title_locator
        self.content_locator = content_locator
        self.image_locator   = image_locator
        self.timeout         = timeout

    # ── Public API ────────────────────────────────────────────────────────────

    def extract(self, driver: WebDriver, limit: int = config.NUM_ARTICLES) -> list[Article]:
        """Return up to *limit* articles in document order.

        Raises ElementsNotFoundError if no card shows up within the wait.
        """
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")

        containers = self._find_containers(driver)
        logger.info("Found %d article container(s)", len(containers))

        articles: list[Article] = []
        for position, container in enumerate(containers, start=1):
            if len(articles) >= limit:
                break
            article = self._extract_one(driver, container, position)
            if article is not None:
                articles.append(article)
        return articles

    # ── Per-container extraction ──────────────────────────────────────────────

    def _find_containers(self, driver: WebDriver) -> list[WebElement]:
        try:
            return WebDriverWait(driver, self.timeout).until(
                EC.presence_of_all_elements_located(self.article_locator)
            )
        except TimeoutException as exc:
            raise ElementsNotFoundError(
                f"No elements matching {self.article_locator[1]!r} "
                f"within {self.timeout}s on {_current_url(driver)}"
            ) from exc

    def _extract_one(self, driver: WebDriver, container: WebElement, position: int) -> Article | None:
        try:
            # Lazy-loaded images only get a real src once scrolled into view.
            driver.execute_script("arguments[0].scrollIntoView(true);", container)

            title = self._extract_title(container)
            if title is None:
                logger.debug("Container %d has no title, skipping", position)
                return None
            return Article(
                title=title,
                content=self._extract_content(container),
                image_url=self._extract_image_url(container),
            )
        except Exception as exc:
            logger.warning("Error parsing article container %d: %s", position, exc)
            return None

    def _extract_title(self, container: WebElement) -> str | None:
        try:
            return container.find_element(*self.title_locator).text or ""
        except NoSuchElementException:
            return None

    def _extract_content(self, container: WebElement) -> str:
        try:
            return container.find_element(*self.content_locator).text or ""
        except WebDriverException as exc:
            logger.debug("Content lookup failed: %s", exc)
            return config.NO_CONTENT

    def _extract_image_url(self, container: WebElement) -> str | None:
        try:
            images = container.find_elements(*self.image_locator)
            if not images:
                return None
            src = images[0].get_attribute("src")
            if src and src.startswith("data:"):
                # Inline placeholder; the real URL sits in data-src until loaded.
                lazy = images[0].get_attribute("data-src")
                if lazy is not None:
                    return lazy
            return src
        except WebDriverException as exc:
            logger.debug("Image lookup failed: %s", exc)
            return None


def _current_url(driver: WebDriver) -> str:
    try:
        return driver.current_url
    except WebDriverException:
        return "<unknown page>"
