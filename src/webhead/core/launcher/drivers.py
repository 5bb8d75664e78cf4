import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ...data_models import BrowserRecord, BrowserType
from ..errors import LaunchError, UnsupportedBrowserError
from .constants import DEFAULT_XDG_DATA_DIRS, LOG_FILE_NAME
from .options import (
    command_line,
    configure_chromium_options,
    configure_epiphany_options,
    configure_firefox_options,
    profile_preferences,
)
from .profiles import ensure_subdir, write_desktop_entry, write_firefox_prefs, write_firefox_user_chrome
from .session_dir import prepare_session_dir

logger = logging.getLogger(__name__)

Launcher = Callable[..., subprocess.Popen]


def _require_session_dir(executable: str, app_name: str, sandboxed: bool) -> Path:
    session_dir = prepare_session_dir(executable, app_name, sandboxed)
    if session_dir is None:
        raise LaunchError(f"Failed to prepare a session directory for {executable}")
    return session_dir


def spawn(argv: List[str], session_dir: Path, env: Optional[Dict[str, str]] = None) -> subprocess.Popen:
    """Start *argv* with stdout and stderr appended to the session log and stdin closed."""
    log_path = session_dir / LOG_FILE_NAME
    logger.info(f"Launching: {' '.join(argv)}")
    with log_path.open('ab') as log_file:
        # the child keeps its own copy of the descriptor
        return subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=log_file,
            stderr=subprocess.STDOUT,
            env=env,
        )


def init_chromium(executable: str, *, sandboxed: bool, url: str, app_name: str,
                  additional_options: Optional[list] = None) -> subprocess.Popen:
    session_dir = _require_session_dir(executable, app_name, sandboxed)
    options = configure_chromium_options(session_dir, url, additional_options)
    return spawn(command_line(executable, options), session_dir)


def init_firefox(executable: str, *, sandboxed: bool, url: str, app_name: str,
                 additional_options: Optional[list] = None) -> subprocess.Popen:
    session_dir = _require_session_dir(executable, app_name, sandboxed)
    options = configure_firefox_options(session_dir, url, additional_options)
    write_firefox_prefs(session_dir, profile_preferences(options))
    write_firefox_user_chrome(session_dir)
    return spawn(command_line(executable, options), session_dir)


def init_epiphany(executable: str, *, sandboxed: bool, url: str, app_name: str,
                  additional_options: Optional[list] = None) -> subprocess.Popen:
    session_dir = _require_session_dir(executable, app_name, sandboxed)
    applications_dir = ensure_subdir(session_dir, "applications")
    write_desktop_entry(applications_dir, app_name, executable, session_dir, url)
    # read os.environ now, XDG_DATA_DIRS may have changed since import
    env = dict(os.environ)
    data_dirs = os.environ.get('XDG_DATA_DIRS') or DEFAULT_XDG_DATA_DIRS
    env['XDG_DATA_DIRS'] = f"{session_dir}:{data_dirs}"
    options = configure_epiphany_options(session_dir, url, additional_options)
    return spawn(command_line(executable, options), session_dir, env=env)


def init_unsupported(executable: str, **kwargs) -> subprocess.Popen:
    raise UnsupportedBrowserError(f"No launcher for browser: {executable}")


LAUNCHERS: Dict[BrowserType, Launcher] = {
    BrowserType.ANY: init_unsupported,
    BrowserType.CHROMIUM: init_chromium,
    BrowserType.GOOGLE_CHROME: init_chromium,
    BrowserType.FIREFOX: init_firefox,
    BrowserType.EPIPHANY: init_epiphany,
}


def launch_browser(browser: BrowserRecord, url: str, app_name: str = "",
                   additional_options: Optional[list] = None) -> subprocess.Popen:
    """Spawn *browser* as web head for *url*; OSError from process creation propagates."""
    launcher = LAUNCHERS.get(browser.type, init_unsupported)
    return launcher(
        browser.executable,
        sandboxed=browser.snapdir,
        url=url,
        app_name=app_name,
        additional_options=additional_options,
    )
