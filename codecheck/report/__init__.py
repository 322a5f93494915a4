"""Report subsystem — terminal rendering of check outcomes."""

from .renderer import build_table, count_failures, render, render_text
from .styles import DEFAULT_STYLES, ReportStyles
