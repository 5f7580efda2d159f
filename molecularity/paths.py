"""Helpers for splitting file paths that may use either separator."""

from __future__ import annotations


def directory_from_path(file_path: str) -> str:
    """Everything before the last ``\\`` or ``/``; empty if there is none."""
    cut = max(file_path.rfind("\\"), file_path.rfind("/"))
    return file_path[:cut] if cut >= 0 else ""


def file_extension(file_name: str) -> str:
    """Text after the last dot; empty if there is none."""
    dot = file_name.rfind(".")
    return file_name[dot + 1:] if dot >= 0 else ""