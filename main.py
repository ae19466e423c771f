"""
main.py
-------
Entry point - runs the full pipeline on your machine using headless Chrome,
or on BrowserStack with --remote / --matrix.

Usage:
    python main.py [--remote | --matrix] [--headed] [--limit N] [--target LANG]
"""
import sys

from elpais_opinion.cli import main

if __name__ == "__main__":
    sys.exit(main())
