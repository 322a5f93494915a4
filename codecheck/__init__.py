"""codecheck — run the static-analysis suite and print a status report."""

__version__ = "0.1.0"
