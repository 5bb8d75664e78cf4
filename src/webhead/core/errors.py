"""OS-style errors raised by session handling.

All errors derive from OSError and carry an ``errno`` so callers can treat
them like the failures of the underlying system calls.
"""
import errno
import os
from typing import Optional


class WebHeadError(OSError):
    """Base class for web head errors, defaults to EIO."""

    default_errno = errno.EIO

    def __init__(self, message: str = "", code: Optional[int] = None):
        code = self.default_errno if code is None else code
        super().__init__(code, message or os.strerror(code))


class UnsupportedBrowserError(WebHeadError):
    """No launcher exists for the requested browser type."""

    default_errno = errno.ENOSYS


class SessionStateError(WebHeadError):
    """The session already owns a browser process."""

    default_errno = errno.EALREADY


class LaunchError(WebHeadError):
    """The browser process could not be brought up."""

    default_errno = errno.EIO
