"""Check registry — the fixed, ordered list of checks and their success rules.

Each check names an external executable plus its arguments. How a finished
process is judged is decided by the check's success predicate, so checks with
unusual exit-code semantics don't need special-casing in the runner.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


# ── Data models ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ProcessRun:
    """What a success predicate gets to see about one finished command."""

    returncode: int | None  # None when the executable could not be spawned
    output: str = ""
    spawn_error: str | None = None

    @property
    def spawned(self) -> bool:
        return self.spawn_error is None


SuccessPredicate = Callable[[ProcessRun], bool]


def exited_cleanly(run: ProcessRun) -> bool:
    """Passed if the process started and exited with status 0. Output is ignored."""
    return run.spawned and run.returncode == 0


def no_output(run: ProcessRun) -> bool:
    """Passed if the process printed nothing, whatever its exit status.

    Formatters list the files they rewrote, so any output means the tree
    was not formatted.
    """
    return run.output == ""


@dataclass(frozen=True)
class CheckSpec:
    """Definition of a single check: what to run and how to judge it."""

    name: str
    description: str
    command: str
    args: tuple[str, ...] = ()
    success: SuccessPredicate = exited_cleanly

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError(f"Check '{self.name}' has no command")

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


# ── Registry ─────────────────────────────────────────────────────────────────


DEFAULT_CHECKS: tuple[CheckSpec, ...] = (
    CheckSpec(
        name="go fmt",
        description="Check code formatting",
        command="go",
        args=("fmt", "./..."),
        success=no_output,
    ),
    CheckSpec(
        name="go vet",
        description="Check source code for suspicious constructs",
        command="go",
        args=("vet", "./..."),
    ),
    CheckSpec(
        name="go test",
        description="Check that tests pass",
        command="go",
        args=("test", "./..."),
    ),
    CheckSpec(
        name="gosec",
        description="Check for potential security issues",
        command="gosec",
        args=("./...",),
    ),
    CheckSpec(
        name="staticcheck",
        description="Check for bugs & performance issues",
        command="staticcheck",
        args=("./...",),
    ),
)
