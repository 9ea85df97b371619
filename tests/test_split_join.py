from __future__ import annotations

import pytest

import pa


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a.ogg", "a.ogg"),
        ("/home/a/file", "file"),
        ("/home/a/", "a"),
        ("/", "/"),
        ("", ""),
    ],
)
def test_basename(path: str, expected: str):
    assert pa.basename(path) == expected


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a.ogg", ("a", ".ogg")),
        ("a", ("a", "")),
        ("/x/a.tar.gz", ("a.tar", ".gz")),
        (".bashrc", (".bashrc", "")),
        ("/x/.config.json", (".config", ".json")),
        ("trailing.", ("trailing.", "")),
    ],
)
def test_basename_with_ext(path: str, expected):
    assert pa.basename(path, ext=True) == expected


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a.ogg", "ogg"),
        ("/x/y/a.tar.gz", "gz"),
        ("a", None),
        (".bashrc", None),
        ("/dir.d/file", None),
        ("name.", None),
    ],
)
def test_extname(path: str, expected):
    assert pa.extname(path) == expected


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/home/a/file", "/home/a"),
        ("/home/a/", "/home"),
        ("/home", "/"),
        ("/", "/"),
        ("file", "."),
        ("a/b", "a"),
        ("", "."),
    ],
)
def test_dirname(path: str, expected: str):
    assert pa.dirname(path) == expected


def test_split():
    assert pa.split("/home/a/file") == ("/home/a", "file")
    assert pa.split("/home/a/file.txt", ext=True) == ("/home/a", "file", ".txt")
    assert pa.split("file") == (".", "file")


def test_split_all_absolute():
    assert pa.split("/home/a/file", all=True) == ("/", "home", "a", "file")
    assert pa.split("/home/a/file.txt", all=True, ext=True) == ("/", "home", "a", "file", ".txt")
    assert pa.split("/", all=True) == ("/", "/")


def test_split_all_relative_stops_at_dot():
    assert pa.split("a/b/c", all=True) == (".", "a", "b", "c")
    assert pa.split("c", all=True) == (".", "c")


def test_join_skips_none_and_empty():
    assert pa.join("/a", "", None, "b") == pa.join("/a", "b") == "/a/b"
    assert pa.join(None, "a", "", "b", "c.txt") == "a/b/c.txt"


def test_join_with_nothing_left_is_empty_string():
    assert pa.join() == ""
    assert pa.join(None, "", None) == ""


def test_join_accepts_path_objects():
    assert pa.join(pa.PathView("/a"), "b") == "/a/b"


@pytest.mark.parametrize(
    "path,n,expected",
    [
        ("/home/a/file", 1, "/home/a"),
        ("/home/a/file", 2, "/home"),
        ("/home/a/file", 3, "/"),
        ("/home/a/file", 10, "/"),
        ("/home/a/file", 0, "/home/a/file"),
        ("a/b/c", 2, "a"),
    ],
)
def test_parent(path: str, n: int, expected: str):
    assert pa.parent(path, n) == expected


@pytest.mark.parametrize(
    "path", ["/home/a/file", "/home/a/", "file", "a/b/c.txt", "/", "/x", ""]
)
def test_parent_of_rejoined_path_is_unchanged(path: str):
    assert pa.parent(pa.join(pa.parent(path), pa.basename(path))) == pa.parent(path)
