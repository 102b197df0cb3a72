"""
Path grammar.

Decomposes a textual path into a prefix (scheme, drive letter or root slash)
and a hierarchy (the slash separated segments after it). Backslashes are
accepted everywhere as equivalent to forward slashes.
"""
from __future__ import annotations

import re
from typing import NamedTuple

__all__ = [
    "PREFIX",
    "HIERARCHY",
    "SplitPath",
    "split",
    "get_prefix",
    "get_hierarchy",
    "is_absolute",
]

PREFIX = 0
HIERARCHY = 1

# Alternation order matters: a scheme wins over a drive letter, which wins
# over a bare root. Letters are ASCII only. The hierarchy alternative is total,
# so every string matches.
_PATH_PATTERN = re.compile(
    r"""
    ^
    ( [a-z0-9]{2,}:// | (?:[a-z]:)?/ )?
    ( [^/]* (?:/+?[^/]+)* (?:/)? | )
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE | re.DOTALL,
)


class SplitPath(NamedTuple):
    """
    Prefix and hierarchy of a path.
    
    Attributes:
        prefix: Root marker including its trailing slash ("/", "C:/", "vfs://"),
            or "" for relative paths
        hierarchy: Remaining segments without leading or trailing slash
    """
    prefix: str
    hierarchy: str


def split(path: str) -> SplitPath:
    """
    Split a path into its prefix and hierarchy.
    
    The grammar is total: any string, including the empty string, parses.
    
    Args:
        path: Path using either "/" or "\\" as separator
        
    Returns:
        SplitPath with "/" separators and no trailing slash on the hierarchy
        
    Examples:
        >>> split("C:\\\\foo")
        SplitPath(prefix='C:/', hierarchy='foo')
        
        >>> split("vfs123://")
        SplitPath(prefix='vfs123://', hierarchy='')
        
        >>> split("foo/bar/")
        SplitPath(prefix='', hierarchy='foo/bar')
    """
    # The pattern can always match the empty string at position 0
    prefix, hierarchy = _PATH_PATTERN.match(path.replace("\\", "/")).groups()  # type: ignore[union-attr]
    return SplitPath(prefix or "", hierarchy.rstrip("/"))


def get_prefix(path: str) -> str:
    """Return the prefix of path, always including its trailing '/'."""
    return split(path)[PREFIX]


def get_hierarchy(path: str) -> str:
    """Return the directories/filename component of path."""
    return split(path)[HIERARCHY]


def is_absolute(path: str) -> bool:
    """Check if path has a prefix."""
    return get_prefix(path) != ""
