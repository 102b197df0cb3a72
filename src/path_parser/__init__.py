"""
path-parser: pure path string arithmetic.

Splits paths into prefix and hierarchy, normalizes them, appends relative
suffixes, resolves parents and computes relative paths between absolute
paths. No filesystem access is ever performed.
"""
from .errors import PathError, RejectsAbsoluteSuffix, RequiresAbsoluteBase
from .grammar import HIERARCHY, PREFIX, SplitPath, get_hierarchy, get_prefix, is_absolute, split
from .path import append, dirname, normalize, relative_to

__version__ = "0.1.0"

__all__ = [
    "PREFIX",
    "HIERARCHY",
    "SplitPath",
    "split",
    "get_prefix",
    "get_hierarchy",
    "is_absolute",
    "normalize",
    "append",
    "dirname",
    "relative_to",
    "PathError",
    "RequiresAbsoluteBase",
    "RejectsAbsoluteSuffix",
]
