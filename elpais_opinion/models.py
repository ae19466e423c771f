"""
elpais_opinion/models.py
------------------------
Article - one Opinion card scraped from the section page.
"""
from dataclasses import dataclass, replace

from .errors import TranslationAlreadySetError


@dataclass(frozen=True)
class Article:
    title: str
    content: str
    image_url: str | None = None
    translated_title: str | None = None

    def with_translation(self, translated_title: str) -> "Article":
        """Return a copy carrying *translated_title*.

        The translated title is write-once: calling this on an article that
        already has one raises TranslationAlreadySetError.
        """
        if self.translated_title is not None:
            raise TranslationAlreadySetError(
                f"Article {self.title!r} is already translated."
            )
        return replace(self, translated_title=translated_title)

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)
