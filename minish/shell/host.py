"""Helpers for running external programs on the host."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from ..redirection import StdioPlan

_CAPTURED_STDOUT = {StdioPlan.CAPTURE_STDOUT, StdioPlan.CAPTURE_BOTH}
_CAPTURED_STDERR = {StdioPlan.CAPTURE_STDERR, StdioPlan.CAPTURE_BOTH}


@dataclass(slots=True)
class ProcessResult:
    exit_code: int
    stdout: bytes | None = None
    stderr: bytes | None = None


def run_process(
    path: str,
    argv: Sequence[str],
    plan: StdioPlan,
    cwd: str,
) -> ProcessResult:
    """Run ``path`` to completion with ``argv[0]`` as the program name.

    Streams not captured by ``plan`` are inherited from this process. Raises
    ``OSError`` when the program cannot be started at all.
    """

    capture_out = plan in _CAPTURED_STDOUT
    capture_err = plan in _CAPTURED_STDERR
    # inherited streams must not interleave with buffered shell output
    sys.stdout.flush()
    sys.stderr.flush()
    logger.debug("exec {} argv={} stdio={}", path, list(argv), plan.value)
    completed = subprocess.run(
        list(argv),
        executable=path,
        cwd=cwd,
        stdout=subprocess.PIPE if capture_out else None,
        stderr=subprocess.PIPE if capture_err else None,
        check=False,
    )
    logger.debug("{} exited with {}", path, completed.returncode)
    return ProcessResult(
        exit_code=completed.returncode,
        stdout=completed.stdout if capture_out else None,
        stderr=completed.stderr if capture_err else None,
    )


ProcessRunner = Callable[[str, Sequence[str], StdioPlan, str], ProcessResult]


__all__ = ["ProcessResult", "ProcessRunner", "run_process"]
