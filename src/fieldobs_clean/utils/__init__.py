"""Utility helpers for line/table IO and directory management."""

from .io import ensure_dirs, load_processed_dataset, read_lines, write_table

__all__ = ["ensure_dirs", "load_processed_dataset", "read_lines", "write_table"]
