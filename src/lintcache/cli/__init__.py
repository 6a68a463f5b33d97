"""Command-line interface for lintcache."""
