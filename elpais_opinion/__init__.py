"""El País Opinion scraper: scrape, translate and analyse Opinion headlines."""

__version__ = "1.0.0"
