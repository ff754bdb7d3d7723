import io
import os

import pytest
from rich.console import Console

from lunaro.config import LauncherConfig, default_paths
from lunaro.favorites import FavoriteSet
from lunaro.repl import Session


class RecordingPopen:
    """Stands in for subprocess.Popen; remembers what would have been spawned."""

    calls = []
    next_pid = 4242

    def __init__(self, cmd, **kwargs):
        self.cmd = list(cmd)
        self.kwargs = kwargs
        self.pid = RecordingPopen.next_pid
        # the launcher closes its handle right after spawning
        stdout = kwargs.get("stdout")
        self.stdout_name = getattr(stdout, "name", stdout)
        RecordingPopen.calls.append(self)

    def wait(self, timeout=None):
        raise AssertionError("launcher must never wait on the child")


@pytest.fixture
def spawned(monkeypatch):
    """Patch Popen and return the list of recorded spawns."""
    RecordingPopen.calls = []
    monkeypatch.setattr("lunaro.launcher.subprocess.Popen", RecordingPopen)
    return RecordingPopen.calls


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def apps_dir(tmp_path):
    d = tmp_path / "pwogams"
    d.mkdir()
    return d


def make_app(apps_dir, filename, mode=0o644):
    p = apps_dir / filename
    p.write_bytes(b"\x7fELF fake appimage")
    os.chmod(p, mode)
    return p


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=300)


def output(console):
    return console.file.getvalue()


@pytest.fixture
def session(tmp_path, apps_dir, console):
    paths = default_paths(tmp_path)
    paths.config_dir.mkdir(parents=True, exist_ok=True)
    config = LauncherConfig(appimage_dir=apps_dir, log_dir=tmp_path / "lunarologs", default_gpu="dgpu")
    favorites = FavoriteSet.load(paths.favorites_file)
    return Session(paths=paths, config=config, favorites=favorites, console=console)
