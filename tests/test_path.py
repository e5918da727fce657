import pytest

from sysprogkit.errors import BadPathError, NoSuchPathError
from sysprogkit.path import Path


@pytest.mark.parametrize(
    "bad", ["", "/1root/2child", "1root/2child/", "1root//2child", "/"]
)
def test_bad_paths_rejected(bad):
    with pytest.raises(BadPathError):
        Path(bad)


def test_non_string_rejected():
    with pytest.raises(TypeError):
        Path(None)


def test_components_and_depth():
    p = Path("someRoot/aChild/aGrandChild/aGreatGrandChild")
    assert p.depth == 4
    assert p.components == ("someRoot", "aChild", "aGrandChild", "aGreatGrandChild")
    assert Path("someRoot").depth == 1


def test_pathname_and_length():
    text = "1root/2child/3gkid"
    p = Path(text)
    assert p.pathname == text
    assert str(p) == text
    assert len(p) == len(text)


def test_component_lookup():
    p = Path("1root/2child/3gkid")
    assert p.component(0) == "1root"
    assert p.component(2) == "3gkid"
    assert p.component(3) is None


def test_prefix():
    p = Path("1root/2child/3gkid")
    pre = p.prefix(2)
    assert pre.pathname == "1root/2child"
    assert pre.depth == 2
    assert len(pre) == len("1root/2child")
    assert p.prefix(1) == Path("1root")


@pytest.mark.parametrize("depth", [0, 4, -1])
def test_prefix_out_of_range(depth):
    with pytest.raises(NoSuchPathError):
        Path("1root/2child/3gkid").prefix(depth)


def test_dup_is_equal_new_object():
    p = Path("a/b/c")
    copy = p.dup()
    assert copy == p
    assert copy is not p
    assert hash(copy) == hash(p)


def test_shared_prefix_depth():
    george = Path("Charles/William/George")
    assert george.shared_prefix_depth(Path("Charles/Harry/Archie")) == 1
    assert george.shared_prefix_depth(Path("Charles/William/Charlotte")) == 2
    assert george.shared_prefix_depth(george) == 3
    assert george.shared_prefix_depth(Path("Anne")) == 0
    assert Path("Charles").shared_prefix_depth(george) == 1


def test_compare_path_signs():
    a = Path("Roth")
    b = Path("Ruth")
    assert a.compare_path(b) < 0
    assert b.compare_path(a) > 0
    assert a.compare_path(Path("Roth")) == 0


def test_compare_string_signs():
    p = Path("Babe/Ruth")
    assert p.compare_string("Babe/Ruth") == 0
    assert p.compare_string("Babe") > 0
    assert p.compare_string("Babf") < 0


def test_ordering_matches_pathname_ordering():
    names = ["y/x", "x", "x/c++", "x/C", "a"]
    paths = sorted(Path(n) for n in names)
    assert [p.pathname for p in paths] == sorted(names)


def test_equality_with_other_types():
    assert (Path("a") == "a") is False