"""
Settings and configuration for path-parser.

Centralizes the command line defaults and provides validation with fail-fast
behavior. The library functions never read settings implicitly; only the CLI
loads them from environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

__all__ = ["Settings", "create_settings_from_env"]

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the path-parser CLI.
    
    Attributes:
        normalize_fallback: Normalize the target when relative-to cannot
            compute a relative path and falls back to it
        verbose: Print the prefix/hierarchy split of inputs alongside results
    """
    normalize_fallback: bool = False
    verbose: bool = False
    
    def __post_init__(self):
        """Validate settings on construction."""
        for name in ("normalize_fallback", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a bool, got {value!r}")


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.
    
    Environment Variables:
        - PATH_PARSER_NORMALIZE_FALLBACK (default: false)
        - PATH_PARSER_VERBOSE (default: false)
    
    Returns:
        Settings object with validated configuration
        
    Raises:
        ValueError: If a variable holds something that is not a boolean
        
    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    return Settings(
        normalize_fallback=_get_bool("PATH_PARSER_NORMALIZE_FALLBACK", False),
        verbose=_get_bool("PATH_PARSER_VERBOSE", False),
    )


def _get_bool(key: str, default: bool) -> bool:
    value: Optional[str] = os.getenv(key)
    if not value:
        return default
    
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {key}: {value!r}")
