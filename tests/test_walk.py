"""
Tests for recursive file enumeration and extension filters.
"""

from __future__ import annotations

import errno
import os

import pytest

from conftest import write_raw
from headertool.errors import FileSystemError
from headertool.walk import iter_files, normalize_extensions


@pytest.mark.parametrize(
    "values, expected",
    [
        (None, None),
        ([], None),
        (["*"], None),
        (["java", "*"], None),
        (["java"], ("java",)),
        ([".java", "xml"], ("java", "xml")),
        (["JAVA"], ("JAVA",)),
    ],
)
def test_normalize_extensions(values, expected):
    assert normalize_extensions(values) == expected


@pytest.fixture
def mixed(tmp_path):
    root = tmp_path / "src"
    for rel in ["A.java", "B.JAVA", "notes.txt", "Makefile", "x.notjava",
                "deep/er/C.java", "deep/er/est/d.xml"]:
        write_raw(root / rel, "content\n")
    (root / "empty" / "nested").mkdir(parents=True)
    return root


def _rel(root, paths):
    return {p.relative_to(root).as_posix() for p in paths}


def test_no_filter_yields_every_file_at_every_depth(mixed):
    assert _rel(mixed, iter_files(mixed)) == {
        "A.java", "B.JAVA", "notes.txt", "Makefile", "x.notjava",
        "deep/er/C.java", "deep/er/est/d.xml",
    }


def test_extension_filter_is_exact_and_case_sensitive(mixed):
    assert _rel(mixed, iter_files(mixed, ("java",))) == {"A.java", "deep/er/C.java"}


def test_multiple_extensions(mixed):
    assert _rel(mixed, iter_files(mixed, ("xml", "txt"))) == {"notes.txt", "deep/er/est/d.xml"}


def test_directories_are_never_yielded(mixed):
    assert all(p.is_file() for p in iter_files(mixed))


def test_empty_directory_yields_nothing(mixed):
    assert list(iter_files(mixed / "empty")) == []


def test_order_is_stable(mixed):
    assert list(iter_files(mixed)) == list(iter_files(mixed))


def test_missing_root_raises(tmp_path):
    with pytest.raises(FileSystemError):
        list(iter_files(tmp_path / "absent"))


def test_unlistable_subdirectory_aborts_walk(mixed, monkeypatch):
    blocked = mixed / "deep" / "er"
    real_scandir = os.scandir

    def fake_scandir(path="."):
        if os.fspath(path) == os.fspath(blocked):
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    with pytest.raises(FileSystemError) as exc_info:
        list(iter_files(mixed))
    assert exc_info.value.path == blocked
    assert str(blocked) in str(exc_info.value)
    assert "Permission denied" in str(exc_info.value)
