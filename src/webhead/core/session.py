import errno
import logging
import os
import signal
import subprocess
from typing import Optional

from ..data_models import BrowserRecord
from .config_loader import ConfigLoader
from .errors import LaunchError, SessionStateError
from .launcher import drivers

logger = logging.getLogger(__name__)


class Session:
    """One supervised web head: a browser process showing *url* as application window.

    A Session owns at most one process. Liveness is only observed on demand
    through running(); nothing waits for the browser in the background.
    """

    def __init__(self, url: str, app_name: str = "", config_loader: Optional[ConfigLoader] = None):
        self.url = url
        self.app_name = app_name
        self.config_loader = config_loader
        self.process: Optional[subprocess.Popen] = None

    @property
    def pid(self) -> Optional[int]:
        return self.process.pid if self.process else None

    def _extra_arguments(self, browser: BrowserRecord) -> Optional[list]:
        if self.config_loader is None:
            return None
        return self.config_loader.get_webhead_setting(f'extra_arguments.{browser.type.setting_name}')

    def start(self, browser: BrowserRecord) -> None:
        if self.process is not None:
            raise SessionStateError(f"Session already started (pid {self.process.pid})")
        try:
            process = drivers.launch_browser(browser, self.url, self.app_name, self._extra_arguments(browser))
        except OSError as e:
            logger.error(f"Failed to launch {browser.executable}: {e}")
            raise
        if process.poll() is not None:
            # reap what was spawned instead of leaving an orphan behind
            exit_code = process.returncode
            self._terminate(process)
            raise LaunchError(f"{browser.executable} exited immediately with status {exit_code}")
        self.process = process
        logger.info(f"Started web head {browser.executable} (pid {process.pid}) for {self.url}")

    def running(self) -> bool:
        return self.process is not None and self.process.poll() is None

    def kill(self, sig: int = signal.SIGHUP) -> None:
        """Send *sig* to the browser process without waiting for it to exit."""
        if not self.running():
            raise ProcessLookupError(errno.ESRCH, os.strerror(errno.ESRCH))
        logger.debug(f"Sending signal {sig} to pid {self.process.pid}")
        os.kill(self.process.pid, sig)

    @staticmethod
    def _terminate(process: subprocess.Popen, timeout: float = 5) -> None:
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=timeout)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait(timeout=timeout)
        else:
            process.wait()

    def close(self) -> None:
        """Terminate the browser if it still runs and release the process."""
        if self.process:
            try:
                self._terminate(self.process)
                logger.info("Web head session closed.")
            except (OSError, subprocess.TimeoutExpired) as e:
                logger.error(f"Error closing web head: {e}", exc_info=True)
            finally:
                self.process = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
