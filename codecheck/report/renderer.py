"""Report renderer — status table plus failure details.

Stage 1 prints one table row per outcome. Stage 2 prints either the success
banner or, for each failed check, its name followed by its output lines.
The rendered text depends only on the outcomes passed in.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from codecheck.report.styles import DEFAULT_STYLES, ReportStyles
from codecheck.runner import CheckOutcome

console = Console()

COLUMNS = ("STATUS", "NAME", "DESCRIPTION")


def count_failures(outcomes: Sequence[CheckOutcome]) -> int:
    return sum(1 for outcome in outcomes if not outcome.success)


def status_text(success: bool, styles: ReportStyles = DEFAULT_STYLES) -> Text:
    if success:
        return Text(styles.passed_label, style=styles.passed)
    return Text(styles.failed_label, style=styles.failed)


def build_table(
    outcomes: Sequence[CheckOutcome], styles: ReportStyles = DEFAULT_STYLES
) -> Table:
    """Summary table: STATUS / NAME / DESCRIPTION, one row per outcome."""
    table = Table(
        box=styles.box,
        border_style=styles.border,
        header_style=styles.table_header,
        padding=styles.cell_padding,
    )
    for title in COLUMNS:
        table.add_column(Text(title, justify="center"), style=styles.cell)

    for outcome in outcomes:
        table.add_row(
            status_text(outcome.success, styles),
            Text(outcome.name),
            Text(outcome.description),
        )
    return table


def _print_failures(
    out: Console, outcomes: Sequence[CheckOutcome], styles: ReportStyles
) -> None:
    for outcome in outcomes:
        if outcome.success:
            continue

        out.print(
            Text.assemble((styles.failure_marker, styles.failed), " ", outcome.name)
        )

        output = outcome.output or styles.empty_output
        for line in output.split("\n"):
            if line:
                # Tool output keeps its own line breaks; never wrap it
                out.print(Text(" " * styles.list_indent + line), soft_wrap=True)


def render(
    outcomes: Sequence[CheckOutcome],
    out: Console | None = None,
    styles: ReportStyles = DEFAULT_STYLES,
) -> int:
    """Print the full report and return the number of failed checks."""
    if out is None:
        out = console

    out.print(build_table(outcomes, styles))

    failures = count_failures(outcomes)
    title = styles.failures_title if failures else styles.success_banner

    # Header sits between blank lines
    out.print()
    out.print(Text(title, style=styles.list_header))
    out.print()

    if failures:
        _print_failures(out, outcomes, styles)
    return failures


def render_text(
    outcomes: Sequence[CheckOutcome],
    styles: ReportStyles = DEFAULT_STYLES,
    width: int = 100,
) -> str:
    """Render the report without color into a string of fixed width."""
    buffer = io.StringIO()
    plain = Console(
        file=buffer,
        width=width,
        color_system=None,
        force_terminal=False,
        legacy_windows=False,
    )
    render(outcomes, plain, styles)
    return buffer.getvalue()
