"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

from ..errors import PathError

T = TypeVar('T')

EXIT_CODES = {
    "ValueError": 2,
    "RequiresAbsoluteBase": 10,
    "RejectsAbsoluteSuffix": 11,
    "PathError": 12,
}

FALLBACK_EXIT_CODE = 1


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.
    
    Returns:
    - 2: Invalid configuration value (ValueError)
    - 10: Relative path where an absolute base is required (RequiresAbsoluteBase)
    - 11: Absolute path where a relative suffix is required (RejectsAbsoluteSuffix)
    - 12: Any other path error (PathError subclasses)
    - 1: Unknown error
    
    Args:
        exc: Exception to map
        
    Returns:
        Exit code
    """
    name = type(exc).__name__
    if name in EXIT_CODES:
        return EXIT_CODES[name]
    if isinstance(exc, PathError):
        return EXIT_CODES["PathError"]
    return FALLBACK_EXIT_CODE


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.
    
    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit. The error message goes to stderr.
    
    Args:
        func: Function to execute
        
    Returns:
        Function result if successful
        
    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
