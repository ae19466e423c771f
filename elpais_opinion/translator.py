"""
elpais_opinion/translator.py
----------------------------
ArticleTranslator - translates Spanish headlines into a target language.

Backends are tried in order, one attempt each:
  1. RapidAPI Google Translate (only when RAPIDAPI_KEY is configured)
  2. The unauthenticated Google "gtx" web endpoint
If both fail the result is "[Translation Failed] <original text>".
"""
import time
from dataclasses import dataclass
from typing import Callable, Iterable

import requests

from . import config
from .log import get_logger
from .models import Article

logger = get_logger(__name__)

FAILED_PREFIX = "[Translation Failed] "

BACKEND_RAPIDAPI = "rapidapi"
BACKEND_FREE     = "google-free"
BACKEND_FAILED   = "failed"


@dataclass(frozen=True)
class Translation:
    text: str
    backend: str

    @property
    def failed(self) -> bool:
        return self.backend == BACKEND_FAILED


class ArticleTranslator:
    """Translates article titles with a keyed endpoint and a free fallback."""

    def __init__(
        self,
        session: requests.Session | None = None,
        api_key: str = config.RAPIDAPI_KEY,
        source: str = config.TRANSLATION_SOURCE,
        timeout: float = config.HTTP_TIMEOUT,
        delay: float = config.TRANSLATION_DELAY,
    ):
        """
        Args:
            session: Shared HTTP session. A fresh one is created if omitted.
            api_key: RapidAPI key; blank skips straight to the free endpoint.
            source:  Source language of every headline.
            timeout: Client-level timeout used for the free endpoint.
            delay:   Pause between headlines in translate_articles().
        """
        self.session = session or requests.Session()
        self.api_key = (api_key or "").strip()
        self.source  = source
        self.timeout = timeout
        self.delay   = delay

    # ── Public API ────────────────────────────────────────────────────────────

    def translate(self, text: str, target: str = config.TRANSLATION_TARGET) -> str:
        """Translate *text*. Never raises; see translate_detailed()."""
        return self.translate_detailed(text, target).text

    def translate_detailed(self, text: str, target: str = config.TRANSLATION_TARGET) -> Translation:
        """Walk the backend chain and report which backend produced the text."""
        for backend, attempt in self._backends():
            translated = attempt(text, target)
            if translated is not None:
                return Translation(translated, backend)
        return Translation(FAILED_PREFIX + text, BACKEND_FAILED)

    def translate_articles(
        self,
        articles: Iterable[Article],
        target: str = config.TRANSLATION_TARGET,
        delay: float | None = None,
    ) -> list[Article]:
        """Return copies of *articles* with translated_title set, printing each pair."""
        delay = self.delay if delay is None else delay
        results = []
        for i, article in enumerate(articles, start=1):
            if i > 1 and delay:
                time.sleep(delay)   # be polite to the free API
            translation = self.translate_detailed(article.title, target)
            print(f"  [{i}] {self.source.upper()}: {article.title}")
            print(f"      {target.upper()}: {translation.text}  ({translation.backend})")
            results.append(article.with_translation(translation.text))
        return results

    # ── Backends ──────────────────────────────────────────────────────────────

    def _backends(self) -> list[tuple[str, Callable[[str, str], str | None]]]:
        chain = []
        if self.api_key:
            chain.append((BACKEND_RAPIDAPI, self._rapidapi_translate))
        chain.append((BACKEND_FREE, self._free_translate))
        return chain

    def _rapidapi_translate(self, text: str, target: str) -> str | None:
        try:
            resp = self.session.post(
                config.RAPIDAPI_URL,
                data={"q": text, "target": target, "source": self.source},
                headers={
                    "Accept-Encoding": "application/gzip",
                    "X-RapidAPI-Key":  self.api_key,
                    "X-RapidAPI-Host": config.RAPIDAPI_HOST,
                },
                timeout=(config.CONNECT_TIMEOUT, config.READ_TIMEOUT),
            )
            resp.raise_for_status()
            translated = resp.json()["data"]["translations"][0]["translatedText"]
            if not isinstance(translated, str):
                raise TypeError(f"unexpected translatedText {translated!r}")
            return translated
        except (requests.RequestException, ValueError, LookupError, TypeError) as exc:
            logger.warning("RapidAPI translation failed, falling back to free endpoint: %s", exc)
            return None

    def _free_translate(self, text: str, target: str) -> str | None:
        # Response shape: [[["translated", "original", ...], ...], ...]
        params = {"client": "gtx", "sl": self.source, "tl": target, "dt": "t", "q": text}
        try:
            resp = self.session.get(config.FREE_TRANSLATE_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            if not isinstance(data, list) or not isinstance(data[0], list) \
                    or not isinstance(data[0][0], list):
                raise TypeError(f"unexpected response shape {data!r:.80}")
            translated = data[0][0][0]
            if translated is None or isinstance(translated, (list, dict)):
                raise TypeError(f"unexpected segment {translated!r}")
            return str(translated)
        except (requests.RequestException, ValueError, LookupError, TypeError) as exc:
            logger.warning("Free translation failed: %s", exc)
            return None
