import argparse
import logging
import sys
import time
from typing import List, Optional

from .core.browser_finder import find_browsers, load_browser_checks, sort_browsers
from .core.config_loader import ConfigLoader, DEFAULT_SETTINGS_FILE
from .core.session import Session
from .data_models import BrowserRecord, BrowserType
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://github.com/tim-janik/webhead"
POLL_INTERVAL_SECONDS = 1.0


def format_browser(browser: BrowserRecord) -> str:
    snap = "snap:" if browser.snapdir else ":    "
    return f"{browser.type.name:<13}{snap} {browser.executable:<30} version {browser.version:<14}\t({browser.identification})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="webhead", description="Show a URL in an installed web browser as application window.")
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="Page to display")
    parser.add_argument("--type", dest="browser_type", default="any",
                        help="Restrict to one browser type: chromium, firefox, google-chrome, epiphany")
    parser.add_argument("--app", dest="app_name", default=None, help="Application name for the window")
    parser.add_argument("--settings", default=str(DEFAULT_SETTINGS_FILE), help="Path to settings.json")
    parser.add_argument("--list", action="store_true", help="Only list the usable browsers")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config_loader = ConfigLoader(args.settings)
    setup_logger(config_loader)
    settings = config_loader.get_webhead_settings()

    try:
        browser_type = BrowserType.from_name(args.browser_type)
    except ValueError as e:
        logger.error(str(e))
        return 2

    browsers = sort_browsers(find_browsers(
        browser_type,
        checks=load_browser_checks(config_loader),
        probe_timeout=settings.probe_timeout_seconds,
    ))
    if not browsers:
        logger.error("Failed to find any usable web browser in $PATH")
        return 2
    for browser in browsers:
        print(f"Found browser {format_browser(browser)}")
    if args.list:
        return 0

    # simply pick the best ranked browser
    browser = browsers[0]
    app_name = args.app_name if args.app_name is not None else (settings.app_name or "webhead")
    session = Session(args.url, app_name, config_loader=config_loader)
    print(f"Starting web head: {browser.executable}")
    try:
        session.start(browser)
    except OSError as e:
        logger.error(f"{browser.executable}: {e.strerror or e}")
        return 1
    try:
        while session.running():
            time.sleep(POLL_INTERVAL_SECONDS)
    except KeyboardInterrupt:
        logger.info("Interrupted, closing web head")
        session.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
