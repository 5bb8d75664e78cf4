from typing import Tuple

from ...data_models import BrowserCheckEntry, BrowserType

VERSION_FLAG = "--version"

# Per-user directory of snap confined applications, relative to $HOME
SNAP_USER_DIR = "snap"

_FIREFOX_PATTERN = r"(Mozilla\s*)(Firefox\s*)([0-9]+[-0-9.a-z+]*).*"
_GOOGLE_CHROME_PATTERN = r"(Google\s*)(Chrome\s\s*)([0-9]+[-0-9.a-z+]*).*"
_CHROMIUM_PATTERN = r"(Chromium\s\s*)([0-9]+[-0-9.a-z+]*).*"
_EPIPHANY_PATTERN = r"(Web\s\s*)([0-9]+[-0-9.a-z+]*).*"

# Aliases of the same binary are listed separately on purpose, discovery does not deduplicate
BROWSER_CHECKS: Tuple[BrowserCheckEntry, ...] = (
    BrowserCheckEntry(exename="firefox", version_pattern=_FIREFOX_PATTERN, browser_type=BrowserType.FIREFOX),
    BrowserCheckEntry(exename="firefox-esr", version_pattern=_FIREFOX_PATTERN, browser_type=BrowserType.FIREFOX),
    BrowserCheckEntry(exename="google-chrome", version_pattern=_GOOGLE_CHROME_PATTERN, browser_type=BrowserType.GOOGLE_CHROME),
    BrowserCheckEntry(exename="google-chrome-stable", version_pattern=_GOOGLE_CHROME_PATTERN, browser_type=BrowserType.GOOGLE_CHROME),
    BrowserCheckEntry(exename="chromium-browser", version_pattern=_CHROMIUM_PATTERN, browser_type=BrowserType.CHROMIUM),
    BrowserCheckEntry(exename="chromium", version_pattern=_CHROMIUM_PATTERN, browser_type=BrowserType.CHROMIUM),
    BrowserCheckEntry(exename="epiphany-browser", version_pattern=_EPIPHANY_PATTERN, browser_type=BrowserType.EPIPHANY),
)
