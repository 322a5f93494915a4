"""Shared test fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable

import pytest

from codecheck.checks import CheckSpec, exited_cleanly
from codecheck.runner import CheckOutcome, CheckResult


@pytest.fixture
def python_check() -> Callable[..., CheckSpec]:
    """Build a check that runs a Python snippet instead of a Go tool."""

    def make(name: str, code: str, success=exited_cleanly) -> CheckSpec:
        return CheckSpec(
            name=name,
            description=f"Run {name}",
            command=sys.executable,
            args=("-c", code),
            success=success,
        )

    return make


@pytest.fixture
def outcome() -> Callable[..., CheckOutcome]:
    """Build an outcome directly, skipping process execution."""

    def make(name: str, success: bool, output: str = "", description: str = "") -> CheckOutcome:
        spec = CheckSpec(name=name, description=description or f"Check {name}", command="true")
        return CheckOutcome(spec=spec, result=CheckResult(success=success, output=output))

    return make
