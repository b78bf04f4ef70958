import os

import pytest

from fungi.expand import abs_from, abs_path, expand, rel_to, relative_from
from fungi.pathlex import PathError, mash, trim_last

HOME = "/home/tester"


@pytest.fixture
def home(monkeypatch):
    monkeypatch.setenv("HOME", HOME)
    return HOME


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    nested = tmp_path / "alpha" / "beta" / "gamma"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    return os.getcwd()


def test_use_syntax(home):
    assert abs_path("~") == home


def test_abs_relative(workdir):
    prev = os.path.dirname(workdir)
    assert abs_path("foo") == mash(workdir, "foo")
    assert abs_path("..//") == prev
    assert abs_path("../") == prev
    assert abs_path("..") == prev
    assert abs_path(".//") == workdir
    assert abs_path("./") == workdir
    assert abs_path(".") == workdir


def test_abs_multiple_parents(workdir):
    grand = os.path.dirname(os.path.dirname(workdir))
    assert abs_path("../../foo") == mash(grand, "foo")
    assert abs_path("./../../foo") == mash(grand, "foo")


def test_abs_home(home):
    assert abs_path("~") == home
    assert abs_path("~/") == home
    assert abs_path("~/foo") == mash(home, "foo")
    assert abs_path("~/foo/bar/../.") == mash(home, "foo")
    assert abs_path("~/foo/bar/../") == mash(home, "foo")
    assert abs_path("~/foo/bar/../blah") == mash(home, "foo/blah")


def test_abs_protocol():
    assert abs_path("file:///foo") == "/foo"


def test_abs_empty():
    with pytest.raises(PathError):
        abs_path("")


def test_expand_home(home):
    assert expand("~/") == home
    assert expand("~") == home
    assert expand("~/foo") == mash(home, "foo")


def test_expand_invalid(home):
    with pytest.raises(PathError):
        expand("~/foo~")
    with pytest.raises(PathError):
        expand("~foo")


def test_expand_empty():
    assert expand("") == ""


def test_expand_xdg(home, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", mash(home, ".config"))
    assert expand("$XDG_CONFIG_HOME") == mash(home, ".config")
    assert expand("${XDG_CONFIG_HOME}") == mash(home, ".config")


def test_expand_variables(home, monkeypatch):
    monkeypatch.setenv("PATHEXT_EXPAND", "bar")
    assert expand("~/foo/$PATHEXT_EXPAND") == mash(home, "foo/bar")
    assert expand("~/foo/${PATHEXT_EXPAND}") == mash(home, "foo/bar")
    assert expand("~/foo/$PATHEXT_EXPAND/blah") == mash(home, "foo/bar/blah")


def test_expand_variable_errors(monkeypatch):
    monkeypatch.delenv("FUNGI_MISSING_VAR", raising=False)
    with pytest.raises(PathError):
        expand("/foo/$FUNGI_MISSING_VAR")
    monkeypatch.setenv("FUNGI_PRESENT", "x")
    with pytest.raises(PathError):
        expand("/foo/${FUNGI_PRESENT")


def test_abs_from(home):
    with pytest.raises(PathError):
        abs_from("foo", "")

    assert abs_from("/foo", "foo1") == "/foo"

    assert abs_from("foo2", abs_path(mash(home, "foo1"))) == mash(home, "foo2")
    assert abs_from("./foo2", abs_path(mash(home, "foo1"))) == mash(home, "foo2")

    assert abs_from("../foo2", abs_path(mash(home, "bar1/foo1"))) == mash(home, "foo2")
    assert abs_from("bar2/foo2", abs_path(mash(home, "bar1/foo1"))) == mash(
        home, "bar1/bar2/foo2"
    )
    assert abs_from("../../foo2", abs_path(mash(home, "bar1/foo1"))) == mash(
        trim_last(home), "foo2"
    )

    assert abs_from("blah1/bar2/foo2", abs_path(mash(home, "bar1/foo1"))) == mash(
        home, "bar1/blah1/bar2/foo2"
    )


def test_relative_from(workdir, home):
    assert relative_from("bar1", "bar1") == mash(workdir, "bar1")

    assert relative_from("bar1", "bar2") == "bar1"
    assert relative_from("foo/bar1", "foo/bar2") == "bar1"
    assert relative_from("~/foo/bar1", "~/foo/bar2") == "bar1"
    assert relative_from("../foo/bar1", "../foo/bar2") == "bar1"

    assert relative_from("foo1/bar1", "foo2/bar2") == "../foo1/bar1"

    assert relative_from("blah1/foo1/bar1", "blah2/foo2/bar2") == "../../blah1/foo1/bar1"


def test_rel_to(workdir):
    beta = os.path.dirname(workdir)
    alpha = os.path.dirname(beta)
    assert rel_to("beta") == beta
    assert rel_to("alpha") == alpha
    assert rel_to("gamma") == workdir


def test_rel_to_empty(workdir):
    assert rel_to("") == workdir


def test_rel_to_missing(workdir):
    with pytest.raises(PathError):
        rel_to("no-such-component-anywhere")