"""
Human-readable output formatting.

Centralizes all CLI output formatting to keep CLI commands thin.
"""
from __future__ import annotations

import typer

from ..grammar import SplitPath


def print_split(path: str, parts: SplitPath, label: str = "Path") -> None:
    """
    Print the prefix/hierarchy decomposition of a path.
    
    Args:
        path: Path as given on the command line
        parts: Result of splitting path
        label: Heading for the input line
    """
    typer.echo(f"{label}: {path}")
    typer.echo(f"  Prefix: {parts.prefix or '(none)'}")
    typer.echo(f"  Hierarchy: {parts.hierarchy or '(empty)'}")
    typer.echo(f"  Absolute: {_format_bool(bool(parts.prefix))}")


def print_result(result: str) -> None:
    """Print an operation result on its own line."""
    typer.echo(result)


def print_flag(value: bool) -> None:
    """Print a boolean result as 'true' or 'false'."""
    typer.echo(_format_bool(value))


def _format_bool(value: bool) -> str:
    return "true" if value else "false"
