import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from .constants import CHROMIUM_ARGUMENTS, FIREFOX_PREFERENCES

logger = logging.getLogger(__name__)


def add_extra_arguments(options: ArgOptions, additional_options: Optional[list]) -> ArgOptions:
    if isinstance(additional_options, list):
        for opt in additional_options:
            if isinstance(opt, str) and opt:
                options.add_argument(opt)
            else:
                logger.warning(f"Ignoring non-string browser argument: {opt!r}")
    elif additional_options is not None:
        logger.warning(f"'extra_arguments' in config is not a list: {additional_options}")
    return options


def configure_chromium_options(session_dir: Path, url: str,
                               additional_options: Optional[list] = None) -> ChromeOptions:
    """Isolated incognito app window for Chromium and Google Chrome."""
    options = ChromeOptions()
    options.add_argument(f"--user-data-dir={session_dir}")
    for arg in CHROMIUM_ARGUMENTS:
        options.add_argument(arg)
    add_extra_arguments(options, additional_options)
    # --app renders the page without tabs and address bar
    options.add_argument(f"--app={url}")
    return options


def configure_firefox_options(session_dir: Path, url: str,
                              additional_options: Optional[list] = None) -> FirefoxOptions:
    """Private window on a fresh profile; preferences end up in the profile's prefs.js."""
    options = FirefoxOptions()
    for name, value in FIREFOX_PREFERENCES.items():
        options.set_preference(name, value)
    options.add_argument("--no-remote")
    # an explicit --profile never reuses an existing profile
    options.add_argument("--profile")
    options.add_argument(str(session_dir))
    options.add_argument("--private-window")
    add_extra_arguments(options, additional_options)
    options.add_argument(url)
    return options


def profile_preferences(options: FirefoxOptions) -> Dict[str, Any]:
    """Our preferences for prefs.js, without the remote-protocol defaults selenium adds."""
    return {name: options.preferences[name] for name in FIREFOX_PREFERENCES if name in options.preferences}


def configure_epiphany_options(session_dir: Path, url: str,
                               additional_options: Optional[list] = None) -> ArgOptions:
    options = ArgOptions()
    options.add_argument("--application-mode")
    options.add_argument(f"--profile={session_dir}")
    add_extra_arguments(options, additional_options)
    options.add_argument(url)
    return options


def command_line(executable: str, options: ArgOptions) -> List[str]:
    return [executable, *options.arguments]
