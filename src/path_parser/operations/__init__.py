"""
Operations package - CLI service layer.

Centralizes exception-to-exit-code mapping and output formatting so the
CLI commands stay thin and testable.
"""
from .mappers import EXIT_CODES, exit_code_for, run_and_exit

__all__ = ["EXIT_CODES", "exit_code_for", "run_and_exit"]
