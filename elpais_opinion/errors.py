"""
elpais_opinion/errors.py
------------------------
Exceptions raised by the scraper. Only the ones that stop a run are
allowed to escape the pipeline; per-item failures are logged where they
happen.
"""


class ScraperError(Exception):
    """Base class for all elpais_opinion errors."""


class ConfigurationError(ScraperError):
    """Required configuration (e.g. grid credentials) is missing."""


class ElementsNotFoundError(ScraperError):
    """No article containers appeared on the page within the wait."""


class NoArticlesError(ScraperError):
    """Extraction finished without accepting a single article."""


class SessionReleasedError(ScraperError):
    """The browser session was used after it had been released."""


class TranslationAlreadySetError(ScraperError):
    """An article's translated title can only be assigned once."""
