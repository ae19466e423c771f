"""
elpais_opinion/images.py
------------------------
ImageDownloader - saves each article's cover image as images/article_<n>.jpg.

Downloads run one after another; a failed download is logged and the
remaining articles are still processed.
"""
from pathlib import Path
from typing import Sequence

import requests

from . import config
from .log import get_logger
from .models import Article

logger = get_logger(__name__)


class ImageDownloader:
    """Downloads article cover images to a local directory."""

    def __init__(
        self,
        session: requests.Session | None = None,
        images_dir: Path | str = config.IMAGES_DIR,
    ):
        self.session    = session or requests.Session()
        self.images_dir = Path(images_dir)

    def download_all(self, articles: Sequence[Article]) -> list[Path]:
        """Download every article image; returns the paths actually written.

        Files are named by the article's 1-based position in *articles*, so
        a repeat run overwrites the previous files.
        """
        saved = []
        for idx, article in enumerate(articles, start=1):
            if not article.has_image:
                continue
            path = self._download(article.image_url, idx)
            if path:
                saved.append(path)
        return saved

    def _download(self, image_url: str, idx: int) -> Path | None:
        path = self.images_dir / f"article_{idx}.jpg"
        try:
            self.images_dir.mkdir(parents=True, exist_ok=True)
            resp = self.session.get(
                image_url,
                headers={"User-Agent": config.USER_AGENT},
                timeout=(config.CONNECT_TIMEOUT, config.READ_TIMEOUT),
                stream=True,
            )
            resp.raise_for_status()
            with open(path, "wb") as f:
                for chunk in resp.iter_content(8192):
                    f.write(chunk)
        except (requests.RequestException, OSError) as exc:
            logger.warning("Failed to download image %s for article %d: %s", image_url, idx, exc)
            _discard(path)
            return None
        print(f"  Downloaded image for article {idx} -> {path}")
        return path


def _discard(path: Path) -> None:
    """Remove a partially written image, if any."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.debug("Could not remove %s: %s", path, exc)
