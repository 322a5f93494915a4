"""Entry point for codecheck — `codecheck` console script."""

from __future__ import annotations

import logging
import sys

from codecheck.checks import DEFAULT_CHECKS
from codecheck.config import settings
from codecheck.report import render
from codecheck.runner import run_checks

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the full check suite in the current directory and print the report."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    logger.info("Running %d checks", len(DEFAULT_CHECKS))
    outcomes = run_checks(DEFAULT_CHECKS)

    failures = render(outcomes)
    if failures:
        logger.info("%d of %d checks failed", failures, len(outcomes))
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
