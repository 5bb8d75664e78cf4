"""webhead: run an installed web browser as application window for a URL.

Finds usable browsers on the host, ranks them and launches one in an isolated
app-like window with a throw-away profile.
"""
from .data_models import BrowserType, BrowserRecord, BrowserCheckEntry  # noqa: F401
from .core import (  # noqa: F401
    ConfigLoader,
    Session,
    find_browsers,
    sort_browsers,
    load_browser_checks,
    WebHeadError,
    UnsupportedBrowserError,
    SessionStateError,
    LaunchError,
)

__version__ = "0.1.0"
