from minish.resolver import ResolutionKind, find_executable, resolve
from minish.session import ShellSession

from conftest import write_script

BUILTINS = {"cd", "echo", "exit", "pwd", "type"}


def test_builtin_shadows_external(tmp_path):
    write_script(tmp_path / "bin", "type")
    session = ShellSession(cwd=str(tmp_path), search_path=(str(tmp_path / "bin"),))
    resolution = resolve("type", BUILTINS, session)
    assert resolution.kind is ResolutionKind.BUILTIN
    assert resolution.path is None


def test_first_directory_wins(tmp_path):
    first = write_script(tmp_path / "a", "tool")
    write_script(tmp_path / "b", "tool")
    session = ShellSession(cwd=str(tmp_path), search_path=(str(tmp_path / "a"), str(tmp_path / "b")))
    resolution = resolve("tool", BUILTINS, session)
    assert resolution.kind is ResolutionKind.EXTERNAL
    assert resolution.path == str(first)


def test_non_executable_and_directories_are_skipped(tmp_path):
    plain = tmp_path / "a"
    plain.mkdir()
    (plain / "tool").write_text("not executable")
    (plain / "tool").chmod(0o644)
    (tmp_path / "b" / "tool").mkdir(parents=True)
    runnable = write_script(tmp_path / "c", "tool")
    dirs = tuple(str(tmp_path / name) for name in ("a", "b", "c"))
    session = ShellSession(cwd=str(tmp_path), search_path=dirs)
    assert find_executable("tool", session) == str(runnable)


def test_missing_and_unreadable_directories(tmp_path):
    session = ShellSession(cwd=str(tmp_path), search_path=(str(tmp_path / "nope"),))
    resolution = resolve("nonexistent_cmd_xyz", BUILTINS, session)
    assert resolution.kind is ResolutionKind.NOT_FOUND
    assert not resolution.found


def test_relative_search_entry_follows_cwd(tmp_path):
    write_script(tmp_path / "one" / "tools", "hello")
    (tmp_path / "two").mkdir()
    session = ShellSession(cwd=str(tmp_path / "two"), search_path=("tools",))
    assert find_executable("hello", session) is None
    session.cwd = str(tmp_path / "one")
    assert find_executable("hello", session) == str(tmp_path / "one" / "tools" / "hello")


def test_names_with_slash_skip_the_search_path(tmp_path):
    script = write_script(tmp_path / "local", "run.sh")
    session = ShellSession(cwd=str(tmp_path), search_path=())
    assert find_executable("./local/run.sh", session) == str(script)
    assert find_executable("local/missing.sh", session) is None


def test_lookups_are_not_cached(tmp_path):
    session = ShellSession(cwd=str(tmp_path), search_path=(str(tmp_path / "bin"),))
    assert not resolve("late", BUILTINS, session).found
    write_script(tmp_path / "bin", "late")
    assert resolve("late", BUILTINS, session).found
