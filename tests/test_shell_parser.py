from minish.redirection import RedirectMode, RedirectTarget
from minish.shell_parser import ParsedCommand, parse_command


def test_parse_blank_line_returns_none():
    assert parse_command("") is None
    assert parse_command("   ") is None


def test_parse_splits_command_and_args():
    parsed = parse_command("echo 'a b' c")
    assert parsed == ParsedCommand("echo", ("a b", "c"))
    assert parsed.redirection.targets() == []


def test_command_word_is_not_redirection():
    parsed = parse_command(">out echo hi")
    assert parsed.command == ">out"
    assert parsed.args == ("echo", "hi")
    assert parsed.redirection.stdout is None


def test_parse_collects_redirections():
    parsed = parse_command("ls -1 /tmp > /tmp/out.txt 2>>/tmp/err.txt")
    assert parsed.command == "ls"
    assert parsed.args == ("-1", "/tmp")
    assert parsed.redirection.stdout == RedirectTarget("/tmp/out.txt", RedirectMode.TRUNCATE)
    assert parsed.redirection.stderr == RedirectTarget("/tmp/err.txt", RedirectMode.APPEND)


def test_quoted_target_path_with_spaces():
    parsed = parse_command("echo hi > 'my file.txt'")
    assert parsed.args == ("hi",)
    assert parsed.redirection.stdout.path == "my file.txt"
