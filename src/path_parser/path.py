"""
Path arithmetic built on the path grammar.

Normalization, appending, parent resolution and relative path computation.
All functions are pure: they take strings, return new strings and never
touch the filesystem.
"""
from __future__ import annotations

import logging
from typing import List

from .errors import RejectsAbsoluteSuffix, RequiresAbsoluteBase
from .grammar import is_absolute, split

__all__ = ["normalize", "append", "dirname", "relative_to", "resolve_segments"]

logger = logging.getLogger(__name__)


def resolve_segments(hierarchy: str) -> List[str]:
    """
    Split a hierarchy into segments while resolving dot directories.
    
    "." and empty segments are dropped, ".." removes the previous segment.
    A ".." with nothing left to remove is absorbed, so a hierarchy can never
    climb above its root.
    
    Args:
        hierarchy: Slash separated hierarchy (no prefix)
        
    Returns:
        List of segments, none of which is "", "." or ".."
    """
    segments: List[str] = []
    
    for segment in hierarchy.split("/"):
        if segment == "..":
            if segments:
                segments.pop()
            else:
                logger.debug(f"Absorbed '..' above root of hierarchy {hierarchy!r}")
        elif segment not in (".", ""):
            segments.append(segment)
    
    return segments


def normalize(path: str) -> str:
    """
    Remove '.', '..' and terminating '/' from path and collapse repeated '/'.
    
    The prefix is kept verbatim (apart from separator conversion).
    
    Examples:
        >>> normalize("foo/../bar")
        'bar'
        
        >>> normalize("vfs://foo//bar/")
        'vfs://foo/bar'
    """
    prefix, hierarchy = split(path)
    return prefix + "/".join(resolve_segments(hierarchy))


def append(path: str, suffix: str) -> str:
    """
    Append suffix to path and normalize the result.
    
    Args:
        path: Absolute base path
        suffix: Relative path to append
        
    Returns:
        Normalized concatenation
        
    Raises:
        RequiresAbsoluteBase: If path is not absolute
        RejectsAbsoluteSuffix: If suffix is absolute
        
    Examples:
        >>> append("C:\\\\foo", "../bar")
        'C:/bar'
    """
    if not is_absolute(path):
        raise RequiresAbsoluteBase(
            f'Path "{path}" must be absolute in order to append "{suffix}"',
            path=path,
            other=suffix,
        )
    
    if is_absolute(suffix):
        raise RejectsAbsoluteSuffix(
            f'Hierarchy "{suffix}" cannot be absolute in order to append to "{path}"',
            path=path,
            suffix=suffix,
        )
    
    return normalize(f"{path}/{suffix}")


def dirname(path: str) -> str:
    """
    Return the normalized parent directory of path.
    
    The parent of a root is the root itself.
    
    Raises:
        RequiresAbsoluteBase: If path is not absolute
    """
    return append(path, "..")


def relative_to(source: str, target: str, *, normalize_fallback: bool = False) -> str:
    """
    Calculate the path leading from source to target.
    
    When the two paths live under different prefixes, or share no leading
    segment, there is no meaningful relative path and target is returned as
    given.
    
    Args:
        source: Absolute path to start from
        target: Absolute path to reach
        normalize_fallback: Normalize target when it is returned as the fallback
        
    Returns:
        "./"-prefixed path for descendants (exactly "./" for the same path),
        "../"-prefixed path otherwise, or the fallback target
        
    Raises:
        RequiresAbsoluteBase: If source or target is not absolute
        
    Examples:
        >>> relative_to("/foo/bar", "/foo/baz")
        '../baz'
        
        >>> relative_to("/foo/bar", "/foo/bar/baz")
        './baz'
    """
    source_prefix, source_hierarchy = split(source)
    target_prefix, target_hierarchy = split(target)
    
    if not source_prefix or not target_prefix:
        raise RequiresAbsoluteBase(
            f'Paths "{source}" and "{target}" must be absolute',
            path=source,
            other=target,
        )
    
    source_segments = resolve_segments(source_hierarchy)
    target_segments = resolve_segments(target_hierarchy)
    
    common = 0
    for source_segment, target_segment in zip(source_segments, target_segments):
        if source_segment != target_segment:
            break
        common += 1
    
    if source_prefix != target_prefix or common == 0:
        logger.debug(f"No relative path from {source!r} to {target!r}, returning target")
        return normalize(target) if normalize_fallback else target
    
    traverser = "../" * (len(source_segments) - common)
    remainder = "/".join(target_segments[common:])
    
    return (traverser or "./") + remainder
