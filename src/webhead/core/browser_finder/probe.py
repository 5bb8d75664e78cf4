import logging
import subprocess
from typing import NamedTuple, Optional, Sequence

from .constants import VERSION_FLAG

logger = logging.getLogger(__name__)


class ProbeResult(NamedTuple):
    exit_code: int
    stdout: str
    stderr: str


def synchronous_exec(path: str, args: Sequence[str], timeout: Optional[float] = None) -> ProbeResult:
    """Run *path* with *args*, wait for it to exit and capture its output.

    Raises OSError if the program cannot be executed and
    subprocess.TimeoutExpired if *timeout* elapses first.
    """
    logger.debug(f"Executing: {path} {' '.join(args)}")
    completed = subprocess.run(
        [path, *args],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        errors='replace',
        timeout=timeout,
        check=False,
    )
    return ProbeResult(completed.returncode, completed.stdout or "", completed.stderr or "")


def run_version_probe(executable: str, timeout: Optional[float] = None) -> Optional[ProbeResult]:
    """Return the result of `<executable> --version`, or None when it could not be run to completion."""
    try:
        result = synchronous_exec(executable, [VERSION_FLAG], timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.warning(f"Version probe of {executable} did not finish within {timeout} seconds")
        return None
    except OSError as e:
        logger.debug(f"Version probe of {executable} failed to execute: {e}")
        return None
    logger.debug(f"{executable}: exit_code={result.exit_code}\n{result.stdout}{result.stderr}")
    return result
