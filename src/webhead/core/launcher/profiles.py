import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

from .constants import FIREFOX_USER_CHROME_CSS

logger = logging.getLogger(__name__)


def ensure_subdir(session_dir: Path, name: str) -> Path:
    subdir = session_dir / name
    subdir.mkdir(parents=True, exist_ok=True)
    return subdir


def format_user_pref(name: str, value: Any) -> str:
    return f"user_pref({json.dumps(name)}, {json.dumps(value)});"


def write_firefox_prefs(profile_dir: Path, preferences: Dict[str, Any]) -> Path:
    """Write *preferences* as prefs.js into *profile_dir*."""
    prefs_file = profile_dir / "prefs.js"
    lines = ["// Generated by webhead"]
    lines += [format_user_pref(name, value) for name, value in preferences.items()]
    prefs_file.write_text("\n".join(lines) + "\n", encoding='utf-8')
    logger.debug(f"Wrote {len(preferences)} preferences to {prefs_file}")
    return prefs_file


def write_firefox_user_chrome(profile_dir: Path) -> Path:
    chrome_dir = ensure_subdir(profile_dir, "chrome")
    css_file = chrome_dir / "userChrome.css"
    css_file.write_text(FIREFOX_USER_CHROME_CSS, encoding='utf-8')
    return css_file


def desktop_file_id(name: str) -> str:
    """File system friendly desktop entry id for *name*."""
    safe = re.sub(r'[^A-Za-z0-9._-]+', '-', name).strip('-.')
    return safe or "webhead"


def write_desktop_entry(applications_dir: Path, app_name: str, executable: str,
                        session_dir: Path, url: str) -> Path:
    """Write the desktop entry Epiphany needs to run a web application.

    Epiphany finds the entry of an application-mode profile by the profile
    directory's base name, so the entry is named after *session_dir*.
    """
    entry_id = desktop_file_id(session_dir.name)
    desktop_file = applications_dir / f"{entry_id}.desktop"
    name = app_name or "WebHead"
    desktop_file.write_text(
        "[Desktop Entry]\n"
        "Type=Application\n"
        f"Name={name}\n"
        f"Exec={executable} --application-mode --profile={session_dir} {url}\n"
        "Terminal=false\n"
        "StartupNotify=true\n"
        f"StartupWMClass={entry_id}\n"
        "NoDisplay=true\n",
        encoding='utf-8',
    )
    return desktop_file
