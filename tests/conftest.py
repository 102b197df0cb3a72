"""Root pytest configuration for path-parser tests."""
import pytest


# Paths that exercise every corner of the grammar
AWKWARD_PATHS = [
    "",
    "/",
    "//",
    "\\",
    ".",
    "..",
    "./",
    "../..",
    "foo",
    "foo/",
    "foo//bar///",
    "/foo/./bar/../baz",
    "C:",
    "C:\\",
    "c:/foo\\bar",
    "C://foo",
    "a:b",
    "ab:/foo",
    "vfs://",
    "vfs:///",
    "VFS123://../x",
    "s3://bucket/key/../other",
    "://foo",
    "x://foo",
    "./C:/foo",
    "foo/../../bar",
    "/../..",
    "line\nbreak/seg",
    "with space/ and\ttab",
    "vfs://foo\\/\\/////\\\\\\/\\\\/\\/\\/\\////bar",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Automatically clear path-parser environment variables."""
    monkeypatch.delenv("PATH_PARSER_NORMALIZE_FALLBACK", raising=False)
    monkeypatch.delenv("PATH_PARSER_VERBOSE", raising=False)


@pytest.fixture
def awkward_paths():
    """Corpus of unusual inputs for property style checks."""
    return list(AWKWARD_PATHS)
