"""Runner subsystem — sequential execution of checks."""

from .engine import CheckOutcome, CheckResult, combine_output, run_check, run_checks
