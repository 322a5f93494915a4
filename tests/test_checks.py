"""Tests for the check registry and success predicates."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from codecheck.checks import (
    DEFAULT_CHECKS,
    CheckSpec,
    ProcessRun,
    exited_cleanly,
    no_output,
)


# ── Success predicates ───────────────────────────────────────────────────────


class TestExitedCleanly:
    def test_zero_exit_passes(self) -> None:
        assert exited_cleanly(ProcessRun(returncode=0))

    def test_zero_exit_with_output_passes(self) -> None:
        assert exited_cleanly(ProcessRun(returncode=0, output="lots of chatter"))

    def test_nonzero_exit_fails(self) -> None:
        assert not exited_cleanly(ProcessRun(returncode=2))

    def test_nonzero_exit_without_output_fails(self) -> None:
        assert not exited_cleanly(ProcessRun(returncode=1, output=""))

    def test_spawn_failure_fails(self) -> None:
        run = ProcessRun(returncode=None, output="", spawn_error="gosec: executable not found")
        assert not run.spawned
        assert not exited_cleanly(run)


class TestNoOutput:
    def test_empty_output_passes(self) -> None:
        assert no_output(ProcessRun(returncode=0, output=""))

    def test_empty_output_passes_even_on_nonzero_exit(self) -> None:
        assert no_output(ProcessRun(returncode=1, output=""))

    def test_file_list_fails(self) -> None:
        assert not no_output(ProcessRun(returncode=0, output="foo.go"))


# ── CheckSpec ────────────────────────────────────────────────────────────────


class TestCheckSpec:
    def test_defaults(self) -> None:
        spec = CheckSpec(name="lint", description="Lint", command="golint")
        assert spec.args == ()
        assert spec.success is exited_cleanly
        assert spec.argv == ["golint"]

    def test_argv(self) -> None:
        spec = CheckSpec(name="vet", description="Vet", command="go", args=("vet", "./..."))
        assert spec.argv == ["go", "vet", "./..."]

    def test_empty_command_rejected(self) -> None:
        with pytest.raises(ValueError, match="no command"):
            CheckSpec(name="broken", description="", command="")

    def test_immutable(self) -> None:
        spec = CheckSpec(name="vet", description="Vet", command="go")
        with pytest.raises(FrozenInstanceError):
            spec.name = "other"  # type: ignore[misc]


# ── Default suite ────────────────────────────────────────────────────────────


class TestDefaultChecks:
    def test_order(self) -> None:
        names = [c.name for c in DEFAULT_CHECKS]
        assert names == ["go fmt", "go vet", "go test", "gosec", "staticcheck"]

    def test_commands(self) -> None:
        argvs = {c.name: c.argv for c in DEFAULT_CHECKS}
        assert argvs["go fmt"] == ["go", "fmt", "./..."]
        assert argvs["go vet"] == ["go", "vet", "./..."]
        assert argvs["go test"] == ["go", "test", "./..."]
        assert argvs["gosec"] == ["gosec", "./..."]
        assert argvs["staticcheck"] == ["staticcheck", "./..."]

    def test_formatter_judged_by_output(self) -> None:
        fmt = DEFAULT_CHECKS[0]
        assert fmt.success is no_output

    def test_others_judged_by_exit_status(self) -> None:
        for check in DEFAULT_CHECKS[1:]:
            assert check.success is exited_cleanly, check.name

    def test_descriptions_present(self) -> None:
        assert all(c.description for c in DEFAULT_CHECKS)
