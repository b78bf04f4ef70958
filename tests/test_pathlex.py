import os
from pathlib import Path

import pytest

from fungi.pathlex import (
    PathError,
    base,
    clean,
    components,
    concat,
    dirname,
    ext,
    first,
    has,
    has_prefix,
    has_suffix,
    is_empty,
    last,
    mash,
    name,
    parse_paths,
    trim_ext,
    trim_first,
    trim_last,
    trim_prefix,
    trim_protocol,
    trim_suffix,
)


@pytest.mark.parametrize(
    "expected, given",
    [
        ("/", "/"),
        ("/", "//"),
        ("/", "///"),
        (".", ".//"),
        ("/", "//.."),
        ("..", "..//"),
        ("/", "/..//"),
        ("foo/bar/blah", "foo//bar///blah"),
        ("/foo/bar/blah", "/foo//bar///blah"),
        ("/", "/.//./"),
        (".", "././/./"),
        (".", "./"),
        ("/", "/./"),
        ("foo", "./foo"),
        ("foo/bar", "./foo/./bar"),
        ("/foo/bar", "/foo/./bar"),
        ("foo/bar", "foo/bar/."),
        ("/", "/.."),
        ("/foo", "/../foo"),
        (".", "foo/.."),
        ("../foo", "../foo"),
        ("/bar", "/foo/../bar"),
        ("foo", "foo/bar/.."),
        ("bar", "foo/../bar"),
        (".", "foo/bar/../../"),
        ("..", "foo/bar/../../.."),
        ("/", "/foo/bar/../../.."),
        ("/", "/foo/bar/../../../.."),
        ("../..", "foo/bar/../../../.."),
        ("blah/bar", "foo/bar/../../blah/bar"),
        ("blah", "foo/bar/../../blah/bar/.."),
        ("../foo", "../foo/"),
        ("../foo/bar", "../foo/bar"),
        ("..", "../foo/.."),
        ("~/foo", "~/foo"),
    ],
)
def test_clean(expected, given):
    assert clean(given) == expected


def test_clean_accepts_pathlike():
    assert clean(Path("/foo/../bar")) == "/bar"


def test_components():
    assert components("/foo//bar/") == ["/", "foo", "bar"]
    assert components("./foo/./bar") == [".", "foo", "bar"]
    assert components("") == []


def test_base():
    assert base("/foo/bar") == "bar"
    with pytest.raises(PathError):
        base("/")
    with pytest.raises(PathError):
        base("foo/..")


def test_concat():
    assert concat("", ".rs") == ".rs"
    assert concat("foo", ".rs") == "foo.rs"
    assert concat("foo.exe", ".rs") == "foo.exe.rs"
    assert concat("/foo/bar", ".rs") == "/foo/bar.rs"


def test_dirname():
    assert dirname("/foo/") == "/"
    assert dirname("/foo/bar") == "/foo"
    with pytest.raises(PathError):
        dirname("/")


def test_is_empty():
    assert is_empty("") is True
    assert is_empty("/foo") is False


def test_ext():
    with pytest.raises(PathError):
        ext("")
    with pytest.raises(PathError):
        ext("foo")
    assert ext("foo.exe") == "exe"
    assert ext("/foo/bar.exe") == "exe"


def test_first():
    assert first("/") == "/"
    assert first(".") == "."
    assert first("..") == ".."
    assert first("foo") == "foo"
    assert first("foo/bar") == "foo"
    with pytest.raises(PathError):
        first("")


def test_last():
    assert last("/") == "/"
    assert last(".") == "."
    assert last("..") == ".."
    assert last("foo") == "foo"
    assert last("/foo/bar") == "bar"
    with pytest.raises(PathError):
        last("")


def test_has():
    path = "/foo/bar"
    assert has(path, "foo") is True
    assert has(path, "/foo") is True
    assert has(path, "/") is True
    assert has(path, "/ba") is True
    assert has(path, "bob") is False


def test_has_prefix():
    assert has_prefix("/foo/bar", "/foo") is True
    assert has_prefix("/foo/bar", "foo") is False


def test_has_suffix():
    assert has_suffix("/foo/bar", "/foo") is False
    assert has_suffix("/foo/bar", "/bar") is True


def test_mash():
    assert mash("/foo", "/bar") == "/foo/bar"
    assert mash("/foo", "bar/") == "/foo/bar"
    assert mash("/foo/", "bar/blah") == "/foo/bar/blah"


def test_name():
    with pytest.raises(PathError):
        name("")
    assert name("foo") == "foo"
    assert name("foo.exe") == "foo"
    assert name("/foo/bar.exe") == "bar"
    assert name("/foo/bar.foo") == "bar"


def test_trim_ext():
    assert trim_ext("") == ""
    assert trim_ext("foo") == "foo"
    assert trim_ext("foo.exe") == "foo"
    assert trim_ext("/foo/bar.exe") == "/foo/bar"


def test_trim_last():
    assert trim_last("/") == ""
    assert trim_last("/foo") == "/"


def test_trim_first():
    assert trim_first("/") == ""
    assert trim_first("/foo") == "foo"


def test_trim_prefix():
    assert trim_prefix("/", "/") == ""
    assert trim_prefix("/foo/bar", "/foo") == "/bar"
    assert trim_prefix("/", "") == "/"
    assert trim_prefix("/foo", "blah") == "/foo"


@pytest.mark.parametrize(
    "expected, given",
    [
        ("/foo", "/foo"),
        ("/foo", "file:///foo"),
        ("foo", "ftp://foo"),
        ("foo", "http://foo"),
        ("foo", "https://foo"),
        ("Foo", "HTTPS://Foo"),
        ("Foo", "Https://Foo"),
        ("FoO", "HttpS://FoO"),
        ("foo", "foo"),
        ("foo/bar", "foo/bar"),
        ("foo//bar", "foo//bar"),
        ("ntp:://foo", "ntp:://foo"),
    ],
)
def test_trim_protocol(expected, given):
    assert trim_protocol(given) == expected


def test_trim_suffix():
    assert trim_suffix("/", "/") == ""
    assert trim_suffix("/foo/", "/") == "/foo"
    assert trim_suffix("/foo", "/") == "/foo"
    assert trim_suffix("/foo/bar", "/bar") == "/foo"


def test_parse_paths():
    assert parse_paths("/foo1:/foo2/bar") == ["/foo1", "/foo2/bar"]


def test_parse_paths_empty_means_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert parse_paths(":/foo1:/foo2/bar") == [os.getcwd(), "/foo1", "/foo2/bar"]