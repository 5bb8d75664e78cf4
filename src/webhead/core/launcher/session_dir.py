"""Per-session scratch directories.

Layout::

    <base>/WebHead/<hostname>-<hostid>-<pid>/<[exe-]microseconds>/

The run directory (``<hostname>-<hostid>-<pid>``) is shared by all sessions of
one process. Run directories left behind by processes that no longer exist are
removed whenever a session directory is prepared next to them.
"""
import logging
import os
import shutil
import socket
import time
import zlib
from pathlib import Path
from typing import Dict, Optional, Tuple

import psutil

from .constants import DESCRIPTOR_FILE_NAME, WEBHEAD_DIR_NAME

logger = logging.getLogger(__name__)

# (base directory, pid) -> run directory created by this process
_run_dirs: Dict[Tuple[Path, int], Path] = {}


def process_alive(pid: int) -> bool:
    """Whether *pid* names an existing process (signal 0 probe on POSIX)."""
    if pid <= 0:
        return False
    return psutil.pid_exists(pid)


def host_id() -> int:
    """32 bit host identifier, like gethostid(3)."""
    try:
        data = Path('/etc/hostid').read_bytes()
        if len(data) >= 4:
            return int.from_bytes(data[:4], 'little')
    except OSError:
        pass
    try:
        machine_id = Path('/etc/machine-id').read_text().strip()
        if len(machine_id) >= 8:
            return int(machine_id[:8], 16)
    except (OSError, ValueError):
        pass
    return zlib.crc32(socket.gethostname().encode()) & 0xffffffff


def run_dir_prefix() -> str:
    return f"{socket.gethostname()}-{host_id():08x}-"


def xdg_cache_home() -> Path:
    value = os.environ.get('XDG_CACHE_HOME', '')
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home() / '.cache'


def session_base_dir(executable: str, sandboxed: bool) -> Path:
    if sandboxed:
        # snap confined browsers may only write below ~/snap/<name>/
        return Path.home() / 'snap' / os.path.basename(executable) / 'current' / WEBHEAD_DIR_NAME
    return xdg_cache_home() / WEBHEAD_DIR_NAME


def remove_stale_run_dirs(base_dir: Path, prefix: str) -> int:
    """Remove run directories below *base_dir* whose process is gone, returns the number removed."""
    removed = 0
    if not base_dir.is_dir():
        return removed
    for entry in base_dir.iterdir():
        if not entry.name.startswith(prefix) or not entry.is_dir():
            continue
        tail = entry.name[len(prefix):]
        if not tail.isdigit():
            continue
        pid = int(tail)
        if pid == os.getpid() or process_alive(pid):
            continue
        logger.info(f"Removing stale session directory: {entry}")
        shutil.rmtree(entry, ignore_errors=True)
        removed += 1
    return removed


def _ensure_run_dir(base_dir: Path) -> Optional[Path]:
    pid = os.getpid()
    prefix = run_dir_prefix()
    base_dir.mkdir(parents=True, exist_ok=True)
    # cleanup runs on every call, only the run directory itself is cached
    remove_stale_run_dirs(base_dir, prefix)
    cached = _run_dirs.get((base_dir, pid))
    if cached is not None and cached.is_dir():
        return cached
    run_dir = base_dir / f"{prefix}{pid}"
    try:
        run_dir.mkdir(mode=0o700)
    except FileExistsError:
        logger.error(f"Session directory for this process exists already: {run_dir}")
        return None
    _run_dirs[(base_dir, pid)] = run_dir
    return run_dir


def _make_leaf(run_dir: Path, leaf_prefix: str) -> Path:
    stamp = time.time_ns() // 1000
    while True:
        leaf = run_dir / f"{leaf_prefix}{stamp}"
        try:
            leaf.mkdir(mode=0o700)
            return leaf
        except FileExistsError:
            stamp += 1


def write_descriptor(session_dir: Path, app_name: str, executable: str) -> Path:
    descriptor = session_dir / DESCRIPTOR_FILE_NAME
    descriptor.write_text(
        f"app: {app_name}\n"
        f"executable: {executable}\n"
        f"pid: {os.getpid()}\n",
        encoding='utf-8',
    )
    return descriptor


def prepare_session_dir(executable: str, app_name: str, sandboxed: bool) -> Optional[Path]:
    """Create a fresh session directory for *executable*, None on failure."""
    base_dir = session_base_dir(executable, sandboxed)
    # the snap base path already names the executable
    leaf_prefix = "" if sandboxed else f"{os.path.basename(executable)}-"
    try:
        run_dir = _ensure_run_dir(base_dir)
        if run_dir is None:
            return None
        session_dir = _make_leaf(run_dir, leaf_prefix)
        write_descriptor(session_dir, app_name, executable)
    except OSError as e:
        logger.error(f"Failed to create session directory below {base_dir}: {e}")
        return None
    logger.debug(f"Prepared session directory: {session_dir}")
    return session_dir
