"""Tests for browser discovery: stub executables stand in for real browsers."""
import os

from webhead.core.browser_finder import BROWSER_CHECKS, find_browsers, load_browser_checks
from webhead.core.browser_finder.probe import run_version_probe
from webhead.core.browser_finder.service import regex_capture, resolve_executable
from webhead.core.config_loader import ConfigLoader
from webhead.data_models import BrowserCheckEntry, BrowserType

SAMPLE_PATTERN = r"(Sample\s+)(Browser\s+)([0-9]+[-0-9.a-z+]*)"


def _check(exename, browser_type=BrowserType.CHROMIUM, pattern=SAMPLE_PATTERN):
    return BrowserCheckEntry(exename=exename, version_pattern=pattern, browser_type=browser_type)


def test_single_stub_browser(home, make_stub):
    exe = make_stub("samplebrowser", 'echo "Sample Browser 12.3.4"')
    browsers = find_browsers(BrowserType.ANY, checks=[_check(exe)])
    assert len(browsers) == 1
    record = browsers[0]
    assert record.version == "12.3.4"
    assert record.identification == "Sample Browser 12.3.4"
    assert record.executable == exe
    assert record.type == BrowserType.CHROMIUM
    assert record.snapdir is False


def test_nonzero_exit_is_skipped(home, make_stub):
    exe = make_stub("failing", 'echo "Sample Browser 1.0"; exit 3')
    assert find_browsers(checks=[_check(exe)]) == []


def test_empty_output_is_skipped(home, make_stub):
    exe = make_stub("silent", 'echo "Sample Browser 1.0" >&2')
    assert find_browsers(checks=[_check(exe)]) == []


def test_unmatched_output_is_skipped(home, make_stub):
    exe = make_stub("other", 'echo "Totally Different 3.0"')
    assert find_browsers(checks=[_check(exe)]) == []


def test_missing_executable_is_skipped(home, tmp_path):
    missing = str(tmp_path / "does-not-exist")
    assert find_browsers(checks=[_check(missing), _check("no-such-browser-webhead-test")]) == []


def test_type_filter(home, make_stub):
    chromium = make_stub("chromiumstub", 'echo "Sample Browser 100.0"')
    firefox = make_stub("firefoxstub", 'echo "Sample Browser 99.0"')
    checks = [_check(chromium, BrowserType.CHROMIUM), _check(firefox, BrowserType.FIREFOX)]
    browsers = find_browsers(BrowserType.FIREFOX, checks=checks)
    assert [b.executable for b in browsers] == [firefox]
    assert len(find_browsers(BrowserType.ANY, checks=checks)) == 2
    assert find_browsers(BrowserType.EPIPHANY, checks=checks) == []


def test_search_path_and_aliases_not_deduplicated(home, make_stub, monkeypatch):
    exe = make_stub("aliasbrowser", 'echo "Sample Browser 5.1"')
    monkeypatch.setenv("PATH", str(make_stub.bin_dir) + os.pathsep + os.environ.get("PATH", ""))
    browsers = find_browsers(checks=[_check("aliasbrowser"), _check(exe)])
    assert len(browsers) == 2
    assert browsers[0].executable == browsers[1].executable == exe


def test_snapdir_detected_after_probe(home, make_stub):
    # the stub creates its snap directory on first start, like snapd does
    exe = make_stub("snapbrowser", 'mkdir -p "$HOME/snap/snapbrowser"\necho "Sample Browser 2.0"')
    assert not (home / "snap" / "snapbrowser").exists()
    browsers = find_browsers(checks=[_check(exe)])
    assert len(browsers) == 1
    assert browsers[0].snapdir is True


def test_probe_timeout_skips_hanging_browser(home, make_stub):
    exe = make_stub("hanging", 'exec sleep 10')
    assert find_browsers(checks=[_check(exe)], probe_timeout=0.5) == []


def test_run_version_probe_captures_streams(make_stub):
    exe = make_stub("streams", 'echo out; echo err >&2; exit 4')
    result = run_version_probe(exe)
    assert result.exit_code == 4
    assert result.stdout == "out\n"
    assert result.stderr == "err\n"


def test_run_version_probe_receives_version_flag(make_stub):
    exe = make_stub("args", 'echo "$@"')
    assert run_version_probe(exe).stdout == "--version\n"


def test_regex_capture_last_group():
    groups = regex_capture(r"(Chromium\s\s*)([0-9]+[-0-9.a-z+]*).*", "Chromium 120.0.6099.71 built on Debian\n")
    assert groups[0] == "Chromium 120.0.6099.71 built on Debian"
    assert groups[-1] == "120.0.6099.71"
    assert regex_capture(r"Firefox", "Chromium 1") == []


def test_builtin_patterns_match_real_version_strings():
    samples = {
        "firefox": ("Mozilla Firefox 128.0.3esr", "128.0.3esr"),
        "google-chrome": ("Google Chrome 126.0.6478.126 ", "126.0.6478.126"),
        "chromium": ("Chromium 126.0.6478.126 snap", "126.0.6478.126"),
        "epiphany-browser": ("Web 44.6", "44.6"),
    }
    by_name = {check.exename: check for check in BROWSER_CHECKS}
    for name, (output, version) in samples.items():
        groups = regex_capture(by_name[name].version_pattern, output)
        assert groups[-1] == version, name


def test_resolve_executable_rejects_non_executable(tmp_path):
    plain = tmp_path / "plain"
    plain.write_text("data")
    assert resolve_executable(str(plain)) is None


def test_load_browser_checks_from_settings(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(
        '{"webhead": {"browser_checks": ['
        '{"exename": "/opt/custom/browser", "version_pattern": "Custom ([0-9.]+)", "browser_type": 1},'
        '{"exename": "broken", "version_pattern": "(", "browser_type": 1}'
        ']}}'
    )
    checks = load_browser_checks(ConfigLoader(settings))
    assert len(checks) == len(BROWSER_CHECKS) + 1
    assert checks[-1].exename == "/opt/custom/browser"
    assert checks[-1].browser_type == BrowserType.CHROMIUM
    assert load_browser_checks() == list(BROWSER_CHECKS)
