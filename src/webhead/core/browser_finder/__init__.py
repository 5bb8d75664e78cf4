"""
Browser finder package.

Public API:
- find_browsers: Probe the catalog of known browsers and return the usable ones.
- sort_browsers: Rank discovered browsers, most suitable first.
- load_browser_checks: Built-in catalog extended by configured entries.
"""

from .constants import BROWSER_CHECKS
from .service import find_browsers, sort_browsers, load_browser_checks
from .version import compare_versions

__all__ = [
    "BROWSER_CHECKS",
    "find_browsers",
    "sort_browsers",
    "load_browser_checks",
    "compare_versions",
]
