"""Check runner — executes checks one by one and classifies each result.

Every check runs as a child process with stdout and stderr captured
separately. The call blocks until the process exits; there is no timeout.
A check whose executable is missing still yields a (failed) result so the
remaining checks run and get reported.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from codecheck.checks import CheckSpec, ProcessRun

logger = logging.getLogger(__name__)


# ── Models ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CheckResult:
    """Result of a single check execution."""

    success: bool
    output: str = ""


@dataclass(frozen=True)
class CheckOutcome:
    """A check paired with its result, in the order the checks were declared."""

    spec: CheckSpec
    result: CheckResult

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def description(self) -> str:
        return self.spec.description

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def output(self) -> str:
        return self.result.output


# ── Execution ────────────────────────────────────────────────────────────────


def combine_output(stdout: str, stderr: str) -> str:
    """Join stdout and stderr (newline-separated) and trim the result."""
    output = stdout
    if stderr:
        if output:
            output += "\n"
        output += stderr
    return output.strip()


def _spawn(spec: CheckSpec, cwd: Path | None) -> ProcessRun:
    """Run the command (no shell) and collect what the predicates need."""
    try:
        proc = subprocess.run(
            spec.argv,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        error = f"{spec.command}: executable not found"
        logger.warning("Check '%s' could not start: %s", spec.name, error)
        return ProcessRun(returncode=None, output=error, spawn_error=error)
    except OSError as e:
        error = f"{spec.command}: {e.strerror or e}"
        logger.warning("Check '%s' could not start: %s", spec.name, error)
        return ProcessRun(returncode=None, output=error, spawn_error=error)

    return ProcessRun(
        returncode=proc.returncode,
        output=combine_output(proc.stdout or "", proc.stderr or ""),
    )


def run_check(spec: CheckSpec, cwd: Path | None = None) -> CheckResult:
    """Run one check and judge it with the check's success predicate."""
    logger.debug("Running check '%s': %s", spec.name, " ".join(spec.argv))
    t0 = time.perf_counter()

    run = _spawn(spec, cwd)
    success = run.spawned and spec.success(run)

    latency = (time.perf_counter() - t0) * 1000
    if run.spawned:
        logger.info(
            "Check '%s' %s (exit=%d, %.0fms)",
            spec.name, "passed" if success else "failed", run.returncode, latency,
        )
    else:
        logger.info("Check '%s' failed (%s, %.0fms)", spec.name, run.spawn_error, latency)
    return CheckResult(success=success, output=run.output)


def run_checks(specs: Sequence[CheckSpec], cwd: Path | None = None) -> list[CheckOutcome]:
    """Run every check in declaration order, strictly one after another."""
    return [CheckOutcome(spec=spec, result=run_check(spec, cwd)) for spec in specs]
