import stat

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated $HOME without XDG overrides."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    return home_dir


@pytest.fixture
def make_stub(tmp_path):
    """Factory writing executable /bin/sh scripts into tmp_path/bin."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir(exist_ok=True)

    def _make(name, body):
        path = bin_dir / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(path)

    _make.bin_dir = bin_dir
    return _make


@pytest.fixture
def cleanup_processes():
    """Collects Popen objects and makes sure they are gone after the test."""
    procs = []
    yield procs
    for proc in procs:
        if proc.poll() is None:
            proc.kill()
        proc.wait(timeout=5)
