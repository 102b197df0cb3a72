"""
path-parser CLI

Exposes each path operation as a verb:
- split: Show prefix and hierarchy of a path
- normalize: Resolve '.', '..' and redundant separators
- is-absolute: Report whether a path has a prefix
- append: Append a relative suffix to an absolute path
- dirname: Resolve the parent directory of an absolute path
- relative-to: Compute the path from one absolute path to another
"""
from __future__ import annotations

import typer
from dataclasses import replace
from typing import Optional

from .grammar import split as _split, is_absolute as _is_absolute
from .operations import run_and_exit
from .operations.printers import print_flag, print_result, print_split
from .path import (
    append as _append,
    dirname as _dirname,
    normalize as _normalize,
    relative_to as _relative_to,
)
from .settings import Settings, create_settings_from_env

app = typer.Typer(name="path-parser", help="Pure path string arithmetic")

_VERBOSE_HELP = "Also show how the input splits into prefix and hierarchy"


def _load_settings(verbose: Optional[bool] = None, normalize_fallback: Optional[bool] = None) -> Settings:
    """
    Load settings from the environment and apply command line overrides.
    
    Args:
        verbose: Explicit --verbose/--no-verbose value, None to keep the env value
        normalize_fallback: Explicit --normalize-fallback value, None to keep the env value
        
    Returns:
        Settings with overrides applied
    """
    settings = create_settings_from_env()
    overrides = {}
    if verbose is not None:
        overrides["verbose"] = verbose
    if normalize_fallback is not None:
        overrides["normalize_fallback"] = normalize_fallback
    return replace(settings, **overrides) if overrides else settings


@app.command()
def split(
    path: str = typer.Argument(..., help="Path to split"),
) -> None:
    """Show the prefix and hierarchy of a path."""
    
    def _run() -> None:
        print_split(path, _split(path))
    
    run_and_exit(_run)


@app.command()
def normalize(
    path: str = typer.Argument(..., help="Path to normalize"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help=_VERBOSE_HELP),
) -> None:
    """Resolve '.', '..' and redundant separators."""
    
    def _run() -> None:
        settings = _load_settings(verbose=verbose)
        if settings.verbose:
            print_split(path, _split(path))
        print_result(_normalize(path))
    
    run_and_exit(_run)


@app.command("is-absolute")
def is_absolute(
    path: str = typer.Argument(..., help="Path to check"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help=_VERBOSE_HELP),
) -> None:
    """Report whether a path has a prefix (root, drive letter or scheme)."""
    
    def _run() -> None:
        settings = _load_settings(verbose=verbose)
        if settings.verbose:
            print_split(path, _split(path))
        print_flag(_is_absolute(path))
    
    run_and_exit(_run)


@app.command()
def append(
    path: str = typer.Argument(..., help="Absolute base path"),
    suffix: str = typer.Argument(..., help="Relative path to append"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help=_VERBOSE_HELP),
) -> None:
    """Append a relative suffix to an absolute path."""
    
    def _run() -> None:
        settings = _load_settings(verbose=verbose)
        if settings.verbose:
            print_split(path, _split(path), label="Base")
            print_split(suffix, _split(suffix), label="Suffix")
        print_result(_append(path, suffix))
    
    run_and_exit(_run)


@app.command()
def dirname(
    path: str = typer.Argument(..., help="Absolute path"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help=_VERBOSE_HELP),
) -> None:
    """Resolve the parent directory of an absolute path."""
    
    def _run() -> None:
        settings = _load_settings(verbose=verbose)
        if settings.verbose:
            print_split(path, _split(path))
        print_result(_dirname(path))
    
    run_and_exit(_run)


@app.command("relative-to")
def relative_to(
    source: str = typer.Argument(..., help="Absolute path to start from"),
    target: str = typer.Argument(..., help="Absolute path to reach"),
    normalize_fallback: Optional[bool] = typer.Option(
        None, "--normalize-fallback/--verbatim-fallback",
        help="Normalize the target when no relative path exists (env: PATH_PARSER_NORMALIZE_FALLBACK)"
    ),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", help=_VERBOSE_HELP),
) -> None:
    """Compute the path leading from SOURCE to TARGET."""
    
    def _run() -> None:
        settings = _load_settings(verbose=verbose, normalize_fallback=normalize_fallback)
        if settings.verbose:
            print_split(source, _split(source), label="Source")
            print_split(target, _split(target), label="Target")
        print_result(_relative_to(source, target, normalize_fallback=settings.normalize_fallback))
    
    run_and_exit(_run)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
