"""
elpais_opinion/text.py
----------------------
Headline normalisation used by the word-frequency analysis.

Only ASCII letters, digits and whitespace survive cleaning, so accented
letters are dropped rather than folded ("política" -> "poltica").
"""
import re

from . import config

# ASCII \s only, so NBSP and other Unicode spaces are stripped, not split on.
_NON_WORD = re.compile(r"[^A-Za-z0-9\s]", re.ASCII)


def clean(text: str) -> str:
    """Strip everything outside [A-Za-z0-9] and whitespace, then lower-case."""
    return _NON_WORD.sub("", text).lower()


def tokenize(text: str, min_length: int = config.MIN_WORD_LENGTH) -> list[str]:
    """Split cleaned *text* on whitespace runs, keeping tokens of at least *min_length*."""
    return [t for t in clean(text).split() if len(t) >= min_length]
