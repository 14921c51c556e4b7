import io
from pathlib import Path

import pytest

from minish import Shell, ShellSession


def write_script(directory: Path, name: str, body: str = "exit 0\n") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def session(tmp_path: Path, bin_dir: Path) -> ShellSession:
    work = tmp_path / "work"
    work.mkdir()
    home = tmp_path / "home"
    home.mkdir()
    search = (str(bin_dir), "/usr/bin", "/bin")
    return ShellSession(cwd=str(work), search_path=search, home=str(home))


@pytest.fixture
def shell(session: ShellSession) -> Shell:
    return Shell(session, stdout=io.StringIO(), stderr=io.StringIO())


def output(shell: Shell) -> tuple[str, str]:
    return shell.stdout.getvalue(), shell.stderr.getvalue()
