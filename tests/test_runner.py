"""Tests for running single commands."""

from __future__ import annotations

import shutil
import signal
import sys

import pytest

from oscmd import runner
from oscmd.command import Cmd
from oscmd.errors import CommandFailedError, CommandNotFoundError, describe_returncode

MISSING = "oscmd-no-such-program-xyz"


def test_combined_output_merges_stdout_and_stderr(py) -> None:
    cmd = py(
        "import sys\n"
        "sys.stdout.write('to stdout\\n'); sys.stdout.flush()\n"
        "sys.stderr.write('to stderr\\n')"
    )

    output = runner.combined_output(cmd)

    assert "to stdout" in output
    assert "to stderr" in output


def test_combined_output_via_descriptor(py) -> None:
    assert py("print('ok')").combined_output().strip() == "ok"


def test_combined_output_does_not_share_stdin(py) -> None:
    output = runner.combined_output(py("import sys; print(len(sys.stdin.read()))"))

    assert output.strip() == "0"


def test_combined_output_failure_keeps_output(py) -> None:
    with pytest.raises(CommandFailedError) as exc_info:
        runner.combined_output(py("import sys; print('partial'); sys.exit(3)"))

    assert exc_info.value.returncode == 3
    assert "partial" in exc_info.value.output
    assert "exit status 3" in str(exc_info.value.message)


def test_combined_output_missing_program() -> None:
    with pytest.raises(CommandNotFoundError, match=f"command not found: {MISSING}"):
        runner.combined_output(Cmd(MISSING))


def test_spawn_succeeds(py) -> None:
    runner.spawn(py("pass"))


def test_spawn_reports_exit_status(py) -> None:
    with pytest.raises(CommandFailedError) as exc_info:
        runner.spawn(py("import sys; sys.exit(4)"))

    assert exc_info.value.returncode == 4


def test_spawn_missing_program() -> None:
    with pytest.raises(CommandNotFoundError):
        runner.spawn(Cmd(MISSING))


def test_run_missing_program_with_exec(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runner, "CAN_EXEC", True)

    with pytest.raises(CommandNotFoundError, match="command not found"):
        runner.run(Cmd(MISSING).with_args("--flag"))


def test_run_missing_program_with_spawn(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runner, "CAN_EXEC", False)

    with pytest.raises(CommandNotFoundError, match="command not found"):
        runner.run(Cmd(MISSING))


def test_run_uses_spawn_when_exec_is_unavailable(
    monkeypatch: pytest.MonkeyPatch, py
) -> None:
    monkeypatch.setattr(runner, "CAN_EXEC", False)

    def _fail_exec(*args: object) -> None:
        raise AssertionError("exec must not be used")

    monkeypatch.setattr(runner.os, "execv", _fail_exec)

    with pytest.raises(CommandFailedError) as exc_info:
        runner.run(py("import sys; sys.exit(5)"))

    assert exc_info.value.returncode == 5


def test_run_replaces_process_with_resolved_binary(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[tuple[str, list[str]]] = []
    monkeypatch.setattr(runner, "CAN_EXEC", True)
    monkeypatch.setattr(runner.os, "execv", lambda path, argv: calls.append((path, argv)))

    Cmd(sys.executable, ["-c", "pass"]).run()

    binary = shutil.which(sys.executable)
    assert calls == [(binary, [binary, "-c", "pass"])]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
def test_describe_returncode_names_signals() -> None:
    assert describe_returncode(-signal.SIGKILL) == "signal: SIGKILL"
    assert describe_returncode(1) == "exit status 1"
