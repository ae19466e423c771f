"""
elpais_opinion/pipeline.py
--------------------------
run_pipeline - Navigate → Extract → release browser → Images → Translate → Analyse.

Everything runs sequentially. The browser session is released straight
after extraction; the later stages only need the extracted Articles.
"""
from dataclasses import dataclass, field
from pathlib import Path

from . import config
from .analyzer import WordAnalyzer
from .browser import BrowserSession
from .errors import NoArticlesError
from .extractor import ArticleExtractor
from .images import ImageDownloader
from .models import Article
from .translator import ArticleTranslator


@dataclass
class PipelineResult:
    label: str
    navigation: str
    articles: list[Article] = field(default_factory=list)
    images: list[Path] = field(default_factory=list)
    repeated_words: dict[str, int] = field(default_factory=dict)

    @property
    def translated_headers(self) -> list[str]:
        return [a.translated_title for a in self.articles if a.translated_title is not None]


def run_pipeline(
    session: BrowserSession,
    translator: ArticleTranslator,
    downloader: ImageDownloader,
    extractor: ArticleExtractor | None = None,
    analyzer: WordAnalyzer | None = None,
    limit: int = config.NUM_ARTICLES,
    target: str = config.TRANSLATION_TARGET,
) -> PipelineResult:
    """
    Run every stage against *session* and return the aggregated results.
    Raises NoArticlesError (after releasing the session) if nothing was scraped.
    """
    extractor = extractor or ArticleExtractor()
    analyzer  = analyzer or WordAnalyzer()

    print(f"\n{'='*60}")
    print(f"  Session: {session.label}")
    print(f"{'='*60}")

    # Step 1 - Navigate & scrape
    articles: list[Article] = []
    try:
        session.load_homepage()
        navigation = session.navigate_to_opinion_section()
        articles = extractor.extract(session.get_loaded_document(), limit)
    except Exception as exc:
        session.release(passed=False, reason=str(exc)[:200])
        raise
    session.release(
        passed=bool(articles),
        reason=f"Scraped {len(articles)} article(s)" if articles else "Zero articles scraped",
    )

    _print_articles(articles)
    if not articles:
        raise NoArticlesError("Zero articles scraped! Check selectors for this device/view.")

    result = PipelineResult(label=session.label, navigation=navigation)

    # Step 2 - Images
    print("\n  ── Downloading images ──")
    result.images = downloader.download_all(articles)

    # Step 3 - Translate
    print(f"\n  ── Translating titles ({translator.source} → {target}) ──")
    result.articles = translator.translate_articles(articles, target)

    # Step 4 - Analyse
    result.repeated_words = analyzer.print_report(result.translated_headers)
    return result


def _print_articles(articles: list[Article]) -> None:
    print("\n  ── Scraped articles ──")
    for i, art in enumerate(articles, start=1):
        print(f"\n  [{i}] 📰 {art.title}")
        print(f"      {art.content}")
        print(f"      🖼  {art.image_url or '(no image)'}")
