"""
Path error classes.

Provides the taxonomy of errors raised by path operations. All of them are
usage errors: they are raised synchronously and never retried or recovered
inside the library.
"""
from __future__ import annotations

from typing import Optional


class PathError(Exception):
    """
    Base class for all path errors.
    
    Carries the path that caused the failure so callers can report it
    without parsing the message.
    """
    
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RequiresAbsoluteBase(PathError):
    """
    An operation that needs an absolute base received a relative path.
    
    Raised when:
    - append: base path has no prefix
    - dirname: path has no prefix
    - relative_to: source or target has no prefix
    """
    
    def __init__(self, message: str, path: Optional[str] = None, other: Optional[str] = None):
        super().__init__(message, path)
        self.other = other


class RejectsAbsoluteSuffix(PathError):
    """
    The portion meant to be relative was absolute.
    
    Raised when:
    - append: suffix has a prefix (root, drive letter or scheme)
    """
    
    def __init__(self, message: str, path: Optional[str] = None, suffix: Optional[str] = None):
        super().__init__(message, path)
        self.suffix = suffix


__all__ = [
    "PathError",
    "RequiresAbsoluteBase",
    "RejectsAbsoluteSuffix",
]
