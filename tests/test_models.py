"""Tests for data models and errors."""
import errno

import pytest
from pydantic import ValidationError

from webhead.core.errors import LaunchError, SessionStateError, UnsupportedBrowserError, WebHeadError
from webhead.data_models import BrowserCheckEntry, BrowserRecord, BrowserType


def test_browser_type_from_name():
    assert BrowserType.from_name("google-chrome") == BrowserType.GOOGLE_CHROME
    assert BrowserType.from_name("GoogleChrome") == BrowserType.GOOGLE_CHROME
    assert BrowserType.from_name("firefox") == BrowserType.FIREFOX
    assert BrowserType.from_name("any") == BrowserType.ANY
    with pytest.raises(ValueError):
        BrowserType.from_name("netscape")
    assert BrowserType.GOOGLE_CHROME.setting_name == "google-chrome"


def test_record_is_immutable():
    record = BrowserRecord(executable="/usr/bin/firefox", identification="Mozilla Firefox 1",
                           version="1", type=BrowserType.FIREFOX)
    assert record.snapdir is False
    with pytest.raises(ValidationError):
        record.version = "2"


def test_check_entry_validation():
    with pytest.raises(ValidationError):
        BrowserCheckEntry(exename="x", version_pattern="(", browser_type=BrowserType.FIREFOX)
    with pytest.raises(ValidationError):
        BrowserCheckEntry(exename="x", version_pattern="x", browser_type=BrowserType.ANY)
    with pytest.raises(ValidationError):
        BrowserCheckEntry(exename=" ", version_pattern="x", browser_type=BrowserType.FIREFOX)


def test_errors_carry_errno():
    assert UnsupportedBrowserError().errno == errno.ENOSYS
    assert SessionStateError("busy").errno == errno.EALREADY
    err = LaunchError("no start")
    assert err.errno == errno.EIO
    assert err.strerror == "no start"
    assert isinstance(err, WebHeadError)
    assert isinstance(err, OSError)
    assert LaunchError(code=errno.EACCES).errno == errno.EACCES
