"""
elpais_opinion/cli.py
---------------------
Command-line entry point.

Usage:
    elpais-opinion                              # headless Chrome on this machine
    elpais-opinion --headed                     # ...with a visible window
    elpais-opinion --remote --browser Firefox --os Windows --os-version 10
    elpais-opinion --remote --device "iPhone 14" --os-version 16 --real-mobile
    elpais-opinion --matrix                     # every GRID_TARGETS entry, one by one
    elpais-opinion --dump-html https://elpais.com/opinion/

Credentials are read from environment variables (or a .env file):
    BROWSERSTACK_USERNAME, BROWSERSTACK_ACCESS_KEY   (remote runs)
    RAPIDAPI_KEY                                     (optional, keyed translation)
"""
import argparse
import sys
from pathlib import Path

import requests
from selenium.common.exceptions import WebDriverException

from . import config
from .analyzer import WordAnalyzer
from .browser import BrowserSession
from .config import GridTarget
from .errors import ConfigurationError, ScraperError
from .images import ImageDownloader
from .log import configure_logging, get_logger
from .pipeline import PipelineResult, run_pipeline
from .translator import ArticleTranslator

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elpais-opinion",
        description="Scrape El País Opinion articles, translate the headlines and report repeated words.",
    )
    where = parser.add_mutually_exclusive_group()
    where.add_argument("--remote", action="store_true", help="run on the BrowserStack grid")
    where.add_argument("--matrix", action="store_true", help="run every configured grid target in turn")
    where.add_argument("--dump-html", nargs="?", const=config.OPINION_URL, metavar="URL",
                       help="print a page's raw HTML and exit")

    grid = parser.add_argument_group("grid target (with --remote)")
    grid.add_argument("--browser", default="Chrome")
    grid.add_argument("--browser-version")
    grid.add_argument("--os")
    grid.add_argument("--os-version")
    grid.add_argument("--device")
    grid.add_argument("--real-mobile", action="store_true")

    parser.add_argument("--limit", type=int, default=config.NUM_ARTICLES)
    parser.add_argument("--target", default=config.TRANSLATION_TARGET, help="target language code")
    parser.add_argument("--images-dir", type=Path, default=config.IMAGES_DIR)
    parser.add_argument("--headed", action="store_true", help="show the local browser window")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser


def target_from_args(args: argparse.Namespace) -> GridTarget:
    return GridTarget(
        browser_name=args.browser,
        browser_version=args.browser_version,
        os=args.os,
        os_version=args.os_version,
        device_name=args.device,
        real_mobile=args.real_mobile,
    )


def dump_html(http: requests.Session, url: str) -> int:
    try:
        resp = http.get(url, headers={"User-Agent": config.USER_AGENT}, timeout=config.HTTP_TIMEOUT)
    except requests.RequestException as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return EXIT_RUN_FAILED
    if not resp.ok:
        print(f"Request failed: {resp.status_code}", file=sys.stderr)
        return EXIT_RUN_FAILED
    print(resp.text)
    return EXIT_OK


def run_matrix(args: argparse.Namespace, http: requests.Session) -> int:
    """Run every GRID_TARGETS entry sequentially and print a combined report."""
    credentials = config.grid_credentials()
    statuses: list[tuple[str, bool]] = []
    all_headers: list[str] = []

    for target in config.GRID_TARGETS:
        try:
            session = BrowserSession.remote(target, credentials)
            result = _run_once(session, args, http)
        except Exception as exc:
            # One broken device must not stop the rest of the matrix.
            logger.error("Session %s failed: %s", target.label, exc)
            statuses.append((target.label, False))
            continue
        statuses.append((target.label, True))
        all_headers.extend(result.translated_headers)

    print("\n" + "=" * 65)
    print("  COMBINED ANALYSIS (all sessions)")
    WordAnalyzer().print_report(all_headers)

    print("=" * 65)
    print("  SESSION STATUS SUMMARY")
    print("=" * 65)
    print(f"  {'#':<5} {'Session':<35} {'Status'}")
    print(f"  {'-'*5} {'-'*35} {'-'*8}")
    for idx, (label, passed) in enumerate(statuses, start=1):
        icon = "✅ PASSED" if passed else "❌ FAILED"
        print(f"  {idx:<5} {label:<35} {icon}")
    print()
    return EXIT_OK if all(passed for _, passed in statuses) else EXIT_RUN_FAILED


def _run_once(session: BrowserSession, args: argparse.Namespace, http: requests.Session) -> PipelineResult:
    return run_pipeline(
        session,
        translator=ArticleTranslator(session=http),
        downloader=ImageDownloader(session=http, images_dir=args.images_dir),
        limit=args.limit,
        target=args.target,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.limit < 1:
        print(f"  [ERROR] --limit must be positive, got {args.limit}", file=sys.stderr)
        return EXIT_CONFIG

    with requests.Session() as http:
        try:
            if args.dump_html:
                return dump_html(http, args.dump_html)
            if args.matrix:
                return run_matrix(args, http)
            if args.remote:
                session = BrowserSession.remote(target_from_args(args))
            else:
                session = BrowserSession.local(headless=not args.headed)
            _run_once(session, args, http)
        except ConfigurationError as exc:
            print(f"  [ERROR] {exc}", file=sys.stderr)
            return EXIT_CONFIG
        except ScraperError as exc:
            print(f"  [ERROR] {exc}", file=sys.stderr)
            return EXIT_RUN_FAILED
        except WebDriverException as exc:
            print(f"  [ERROR] Browser failure: {exc.msg}", file=sys.stderr)
            return EXIT_RUN_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
