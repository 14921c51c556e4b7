import pytest

from minish.exceptions import RedirectionError
from minish.redirection import (
    RedirectionPlan,
    RedirectMode,
    RedirectTarget,
    StdioPlan,
    extract,
    match_redirection,
    prepare_targets,
    write_target,
)


def test_standalone_stdout_operator():
    args, plan = extract(["1>", "/tmp/o"])
    assert args == []
    assert plan.stdout == RedirectTarget("/tmp/o", RedirectMode.TRUNCATE)
    assert plan.stderr is None


def test_fused_append_operator():
    args, plan = extract([">>/tmp/o"])
    assert args == []
    assert plan.stdout == RedirectTarget("/tmp/o", RedirectMode.APPEND)


def test_standalone_stderr_append():
    args, plan = extract(["2>>", "/tmp/e"])
    assert args == []
    assert plan.stderr == RedirectTarget("/tmp/e", RedirectMode.APPEND)
    assert plan.stdout is None


@pytest.mark.parametrize(
    "token, path, mode, stream",
    [
        ("2>>err", "err", RedirectMode.APPEND, "stderr"),
        ("1>>out", "out", RedirectMode.APPEND, "stdout"),
        (">>out", "out", RedirectMode.APPEND, "stdout"),
        ("2>err", "err", RedirectMode.TRUNCATE, "stderr"),
        ("1>out", "out", RedirectMode.TRUNCATE, "stdout"),
        (">out", "out", RedirectMode.TRUNCATE, "stdout"),
    ],
)
def test_fused_prefix_priority(token, path, mode, stream):
    _, plan = extract([token])
    assert getattr(plan, stream) == RedirectTarget(path, mode)


def test_arguments_keep_their_order():
    args, plan = extract(["a", ">", "out", "b", "2>err", "c"])
    assert args == ["a", "b", "c"]
    assert plan.stdout == RedirectTarget("out", RedirectMode.TRUNCATE)
    assert plan.stderr == RedirectTarget("err", RedirectMode.TRUNCATE)


def test_dangling_operator_is_literal():
    args, plan = extract(["hello", ">"])
    assert args == ["hello", ">"]
    assert plan == RedirectionPlan()
    args, plan = extract(["2>>"])
    assert args == ["2>>"]
    assert plan.stderr is None


def test_last_redirection_wins():
    args, plan = extract([">", "first", ">>", "second"])
    assert args == []
    assert plan.stdout == RedirectTarget("second", RedirectMode.APPEND)


def test_non_redirection_tokens_untouched():
    args, plan = extract(["a>b", "3>x", "-->"])
    assert args == ["a>b", "3>x", "-->"]
    assert plan.targets() == []


def test_match_reports_consumed_tokens():
    op, target, consumed = match_redirection(["2>", "log"], 0)
    assert (op.symbol, target, consumed) == ("2>", "log", 2)
    assert match_redirection(["plain"], 0) is None


def test_stdio_plan_cases():
    out = RedirectTarget("o", RedirectMode.TRUNCATE)
    err = RedirectTarget("e", RedirectMode.APPEND)
    assert RedirectionPlan().stdio_plan is StdioPlan.INHERIT_ALL
    assert RedirectionPlan(stdout=out).stdio_plan is StdioPlan.CAPTURE_STDOUT
    assert RedirectionPlan(stderr=err).stdio_plan is StdioPlan.CAPTURE_STDERR
    assert RedirectionPlan(stdout=out, stderr=err).stdio_plan is StdioPlan.CAPTURE_BOTH


def test_prepare_truncates_but_leaves_append_targets(tmp_path):
    (tmp_path / "out.txt").write_text("old")
    (tmp_path / "log.txt").write_text("keep\n")
    plan = RedirectionPlan(
        stdout=RedirectTarget("out.txt", RedirectMode.TRUNCATE),
        stderr=RedirectTarget("log.txt", RedirectMode.APPEND),
    )
    prepare_targets(plan, tmp_path)
    assert (tmp_path / "out.txt").read_text() == ""
    assert (tmp_path / "log.txt").read_text() == "keep\n"


def test_write_target_modes(tmp_path):
    target = RedirectTarget(str(tmp_path / "f.txt"), RedirectMode.APPEND)
    write_target(target, "one\n", tmp_path)
    write_target(target, b"two\n", tmp_path)
    assert (tmp_path / "f.txt").read_text() == "one\ntwo\n"
    write_target(RedirectTarget("f.txt", RedirectMode.TRUNCATE), "three\n", tmp_path)
    assert (tmp_path / "f.txt").read_text() == "three\n"


def test_unopenable_target_raises(tmp_path):
    plan = RedirectionPlan(stdout=RedirectTarget("missing/dir/out", RedirectMode.TRUNCATE))
    with pytest.raises(RedirectionError):
        prepare_targets(plan, tmp_path)
