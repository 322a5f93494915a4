"""Check definitions — the fixed suite and its success predicates."""

from .registry import (
    DEFAULT_CHECKS,
    CheckSpec,
    ProcessRun,
    SuccessPredicate,
    exited_cleanly,
    no_output,
)

__all__ = [
    "DEFAULT_CHECKS",
    "CheckSpec",
    "ProcessRun",
    "SuccessPredicate",
    "exited_cleanly",
    "no_output",
]
