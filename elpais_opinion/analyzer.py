"""
elpais_opinion/analyzer.py
--------------------------
WordAnalyzer - counts word frequency across translated article headers
and reports words that appear more than the configured threshold.
"""
from collections import Counter
from typing import Iterable

from . import config
from .text import tokenize


class WordAnalyzer:
    """Analyses word frequency in a list of translated headers."""

    def __init__(
        self,
        threshold: int = config.REPEAT_THRESHOLD,
        min_length: int = config.MIN_WORD_LENGTH,
    ):
        """
        Args:
            threshold:  Report words that appear STRICTLY MORE THAN this number.
            min_length: Tokens shorter than this are never counted.
        """
        self.threshold  = threshold
        self.min_length = min_length

    def count_words(self, headers: Iterable[str]) -> dict[str, int]:
        """Return {word: count} for every counted token across *headers*."""
        counter: Counter = Counter()
        for header in headers:
            counter.update(tokenize(header, self.min_length))
        return dict(counter)

    def analyze(self, headers: Iterable[str]) -> dict[str, int]:
        """Return {word: count} for words appearing > threshold times.

        Entries are ordered by count (descending), then alphabetically.
        """
        repeated = [
            (w, c) for w, c in self.count_words(headers).items() if c > self.threshold
        ]
        return dict(sorted(repeated, key=lambda x: (-x[1], x[0])))

    def print_report(self, headers: Iterable[str]) -> dict[str, int]:
        """Print a formatted frequency table to the console and return it."""
        repeated = self.analyze(headers)

        print("\n" + "=" * 55)
        print("  WORD FREQUENCY ANALYSIS (translated headers)")
        print("=" * 55)

        if not repeated:
            print(f"  No words appear more than {self.threshold} time(s).\n")
            return repeated

        print(f"  Words appearing more than {self.threshold} time(s):\n")
        print(f"  {'WORD':<25} {'COUNT':>5}")
        print(f"  {'-'*25} {'-'*5}")
        for word, count in repeated.items():
            print(f"  {word:<25} {count:>5}")
        print()
        return repeated
