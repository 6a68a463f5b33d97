"""Cache-aware analysis runs."""

from .runner import Analyzer, LintRunResult, lint_files

__all__ = ["Analyzer", "LintRunResult", "lint_files"]
