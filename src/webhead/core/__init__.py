"""Discovery, session directories, launching and configuration."""

from .browser_finder import find_browsers, sort_browsers, load_browser_checks
from .config_loader import ConfigLoader
from .errors import WebHeadError, UnsupportedBrowserError, SessionStateError, LaunchError
from .session import Session

__all__ = [
    "find_browsers",
    "sort_browsers",
    "load_browser_checks",
    "ConfigLoader",
    "WebHeadError",
    "UnsupportedBrowserError",
    "SessionStateError",
    "LaunchError",
    "Session",
]
