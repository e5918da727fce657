import random

import pytest

from sysprogkit.dynarray import DynArray


def cmp(a, b):
    return (a > b) - (a < b)


def make(values):
    arr = DynArray(0)
    for v in values:
        arr.add(v)
    return arr


def test_new_array_holds_empty_slots():
    arr = DynArray(3)
    assert len(arr) == 3
    assert arr.to_list() == [None, None, None]


def test_default_length_is_empty():
    assert len(DynArray()) == 0


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        DynArray(-1)


def test_add_grows_and_keeps_order():
    values = ["a", "b", "c", "d", "e"]
    arr = make(values)
    assert len(arr) == len(values)
    assert list(arr) == values
    assert [arr[i] for i in range(len(arr))] == values


def test_set_returns_old_element():
    arr = make(["x", "y"])
    old = arr.set(1, "z")
    assert old == "y"
    assert arr.to_list() == ["x", "z"]


@pytest.mark.parametrize("index", [2, 5, -1])
def test_get_out_of_range(index):
    arr = make([1, 2])
    assert arr[0] == 1
    assert arr[1] == 2
    with pytest.raises(IndexError):
        arr.__getitem__(index)
    assert arr.to_list() == [1, 2]


def test_set_out_of_range():
    with pytest.raises(IndexError):
        DynArray(0).set(0, "a")


def test_add_at_positions():
    arr = make(["b", "d"])
    arr.add_at(0, "a")
    arr.add_at(2, "c")
    arr.add_at(len(arr), "e")
    assert arr.to_list() == ["a", "b", "c", "d", "e"]


def test_add_at_beyond_end_rejected():
    arr = make(["a"])
    with pytest.raises(IndexError):
        arr.add_at(2, "b")


def test_remove_at_returns_element():
    arr = make(["a", "b", "c"])
    assert arr.remove_at(1) == "b"
    assert arr.to_list() == ["a", "c"]
    with pytest.raises(IndexError):
        arr.remove_at(2)


def test_to_list_is_a_copy():
    arr = make([1, 2])
    snapshot = arr.to_list()
    snapshot.append(3)
    assert len(arr) == 2


def test_map_passes_extra():
    arr = make(["Ruth", "Gehrig"])
    seen = []
    arr.map(lambda element, extra: seen.append((element, extra)), "pos")
    assert seen == [("Ruth", "pos"), ("Gehrig", "pos")]


def test_sort_orders_ascending():
    rng = random.Random(217)
    values = [rng.randint(-50, 50) for _ in range(40)]
    arr = make(values)
    arr.sort(cmp)
    assert arr.to_list() == sorted(values)


def test_sort_with_reverse_compare():
    arr = make(["b", "c", "a"])
    arr.sort(lambda a, b: cmp(b, a))
    assert arr.to_list() == ["c", "b", "a"]


def test_search_finds_first_match():
    arr = make(["a", "b", "a"])
    assert arr.search("a", cmp) == 0
    assert arr.search("b", cmp) == 1
    assert arr.search("z", cmp) is None


def test_bsearch_found():
    values = [1, 3, 5, 7, 9]
    arr = make(values)
    for i, v in enumerate(values):
        assert arr.bsearch(v, cmp) == (True, i)


def test_bsearch_insertion_points():
    values = [10, 20, 30]
    arr = make(values)
    for sought in (5, 15, 25, 35):
        found, index = arr.bsearch(sought, cmp)
        assert found is False
        arr_copy = values[:index] + [sought] + values[index:]
        assert arr_copy == sorted(arr_copy)


def test_bsearch_empty():
    assert DynArray(0).bsearch("x", cmp) == (False, 0)


def test_bsearch_insert_keeps_sorted():
    rng = random.Random(4)
    arr = DynArray()
    for _ in range(30):
        v = rng.randint(0, 100)
        found, index = arr.bsearch(v, cmp)
        if not found:
            arr.add_at(index, v)
    result = arr.to_list()
    assert result == sorted(set(result))