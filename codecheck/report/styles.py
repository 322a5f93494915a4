"""Report styling — colors, borders and fixed strings used by the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from rich.box import ROUNDED, Box
from rich.style import Style

MAGENTA = "magenta"
WHITE = "bright_white"
GREEN = "green"
RED = "red"


@dataclass(frozen=True)
class ReportStyles:
    """Immutable presentation settings, built once and handed to the renderer."""

    border: Style = Style(color=MAGENTA)
    box: Box = ROUNDED
    table_header: Style = Style(color=MAGENTA, bold=True)
    cell: Style = Style(color=WHITE)
    cell_padding: tuple[int, int] = (0, 1)
    passed: Style = Style(color=GREEN)
    failed: Style = Style(color=RED)
    list_header: Style = Style(color=MAGENTA, bold=True)
    list_indent: int = 2

    passed_label: str = "passed"
    failed_label: str = "failed"
    failure_marker: str = "✖"
    failures_title: str = "Failed Checks:"
    success_banner: str = "All checks passed! 🎉"
    empty_output: str = "No output (but command failed)"


DEFAULT_STYLES = ReportStyles()
