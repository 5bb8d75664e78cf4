"""
Launcher package.

Public API:
- launch_browser: Spawn a discovered browser as web head for a URL.
- prepare_session_dir: Create an isolated scratch directory for one session.
- LAUNCHERS: Launch strategy per BrowserType.
"""

from .drivers import LAUNCHERS, launch_browser
from .session_dir import prepare_session_dir, process_alive

__all__ = ["LAUNCHERS", "launch_browser", "prepare_session_dir", "process_alive"]
