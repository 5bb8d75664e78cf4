import functools
import logging
import os
import re
import shutil
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from pydantic import ValidationError

from ...data_models import BrowserCheckEntry, BrowserRecord, BrowserType
from ..config_loader import ConfigLoader
from .constants import BROWSER_CHECKS, SNAP_USER_DIR
from .probe import run_version_probe
from .version import compare_versions

logger = logging.getLogger(__name__)


def resolve_executable(exename: str) -> Optional[str]:
    """Absolute names are used as is, other names are searched in $PATH."""
    if os.path.isabs(exename):
        if os.path.isfile(exename) and os.access(exename, os.X_OK):
            return exename
        return None
    return shutil.which(exename)


def regex_capture(pattern: str, text: str) -> List[str]:
    """Search *pattern* in *text* and return the whole match followed by all capture groups."""
    match = re.search(pattern, text)
    if not match:
        return []
    return [match.group(0)] + [group or "" for group in match.groups()]


def has_snap_dir(exename: str) -> bool:
    return (Path.home() / SNAP_USER_DIR / os.path.basename(exename)).exists()


def probe_browser(check: BrowserCheckEntry, probe_timeout: Optional[float] = None) -> Optional[BrowserRecord]:
    """Identify the browser described by *check*, None if it is unavailable or unrecognized."""
    path = resolve_executable(check.exename)
    if not path:
        return None
    result = run_version_probe(path, timeout=probe_timeout)
    if result is None or result.exit_code != 0 or not result.stdout:
        return None
    groups = regex_capture(check.version_pattern, result.stdout)
    if not groups:
        logger.debug(f"{path}: version output does not match {check.version_pattern!r}")
        return None
    # snap creates ~/snap/<name>/ lazily on first start, so check after running --version
    snapdir = has_snap_dir(check.exename)
    return BrowserRecord(
        executable=os.path.abspath(path),
        identification=groups[0],
        version=groups[-1],
        type=check.browser_type,
        snapdir=snapdir,
    )


def find_browsers(browser_type: BrowserType = BrowserType.ANY,
                  checks: Optional[Iterable[BrowserCheckEntry]] = None,
                  probe_timeout: Optional[float] = None) -> List[BrowserRecord]:
    """Find the browsers in $PATH that can be used as web heads.

    Candidates are probed one after another in catalog order. Anything that is
    missing, fails its version probe or prints unrecognized output is skipped.
    """
    browsers: List[BrowserRecord] = []
    for check in (BROWSER_CHECKS if checks is None else checks):
        if browser_type != BrowserType.ANY and check.browser_type != browser_type:
            continue
        record = probe_browser(check, probe_timeout=probe_timeout)
        if record:
            logger.debug(f"Found {record.type.name} {record.version} at {record.executable}")
            browsers.append(record)
    logger.info(f"Found {len(browsers)} usable browser(s)")
    return browsers


def _compare_records(a: BrowserRecord, b: BrowserRecord) -> int:
    if a.type != b.type:
        return -1 if a.type < b.type else 1
    by_version = compare_versions(b.version, a.version)  # newest first
    if by_version:
        return by_version
    if a.identification != b.identification:
        return -1 if a.identification < b.identification else 1
    if a.snapdir != b.snapdir:
        return -1 if not a.snapdir else 1
    return (a.executable > b.executable) - (a.executable < b.executable)


def sort_browsers(browsers: Sequence[BrowserRecord]) -> List[BrowserRecord]:
    """Rank browsers: preferred type, newest version, unconfined before snap confined."""
    return sorted(browsers, key=functools.cmp_to_key(_compare_records))


def load_browser_checks(config_loader: Optional[ConfigLoader] = None) -> List[BrowserCheckEntry]:
    """Built-in catalog followed by the entries configured under 'webhead.browser_checks'."""
    checks = list(BROWSER_CHECKS)
    if config_loader is None:
        return checks
    extra = config_loader.get_webhead_setting('browser_checks', [])
    if not isinstance(extra, list):
        logger.warning(f"'webhead.browser_checks' in config is not a list: {extra}")
        return checks
    for entry in extra:
        try:
            checks.append(BrowserCheckEntry.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Ignoring invalid browser check {entry!r}: {e}")
    return checks
