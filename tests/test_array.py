import sys
import threading

import pytest

from streamkit.array import Array, List, map_array
from streamkit.iterator import ArrayIterator


def _equals(a, b):
    return a == b


def _array(*values):
    arr = Array(_equals)
    for v in values:
        arr.add(v)
    return arr


def test_new_array_is_empty():
    arr = Array(_equals)
    assert len(arr) == 0
    assert arr.is_empty()


def test_is_empty_after_add():
    assert not _array(1).is_empty()


def test_new_array_with_capacity():
    arr = Array(_equals, 0)
    assert arr.capacity == 0
    assert Array(_equals, 10).capacity == 10


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        Array(_equals, -1)


def test_add_extreme_values():
    arr = Array(_equals)
    arr.push(0)
    arr.push(sys.maxsize)
    assert arr.contains(0)
    assert arr.contains(sys.maxsize)


def test_add_remove():
    arr = Array(_equals)
    arr.push(1)
    arr.push(2)
    assert arr.contains(1) and arr.contains(2)
    assert arr.remove(2) is True
    assert not arr.contains(2)
    assert len(arr) == 1


def test_remove_missing_returns_false():
    arr = _array(1, 2)
    assert arr.remove(5) is False
    assert arr.to_list() == [1, 2]


def test_sub_list_and_equals():
    arr = Array(_equals)
    arr.push(1)
    arr.push(2)
    arr.push(3)
    sub = arr.sub_list(1, 3)
    assert len(sub) == 2
    assert sub.to_list() == [2, 1]
    cloned = arr.clone()
    assert arr == cloned


def test_sub_list_out_of_range_raises():
    arr = _array(1, 2)
    with pytest.raises(IndexError):
        arr.sub_list(1, 5)
    with pytest.raises(IndexError):
        arr.sub_slice(2, 1)


def test_filter():
    arr = Array(_equals)
    arr.push(1)
    arr.push(2)
    arr.push(3)
    filtered = arr.filter(lambda x: x % 2 == 0)
    assert len(filtered) == 1
    assert filtered.contains(2)


def test_filter_reverses_order_of_matches():
    arr = _array(1, 2, 3, 4)
    assert arr.filter(lambda x: x > 1).to_list() == [4, 3, 2]


def test_concurrent_pushes_all_land():
    arr = Array(_equals)
    missing = []

    def worker(val):
        arr.push(val)
        if not arr.contains(val):
            missing.append(val)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert missing == []
    assert len(arr) == 100


def test_out_of_range_get_raises():
    arr = Array(_equals)
    arr.push(1)
    with pytest.raises(IndexError, match="out of range"):
        arr.__getitem__(5)
    assert arr.to_list() == [1]


def test_negative_index_raises():
    arr = _array(1)
    with pytest.raises(IndexError, match="out of range"):
        arr.__getitem__(-1)
    with pytest.raises(IndexError, match="out of range"):
        arr.__setitem__(-1, 3)
    assert arr.to_list() == [1]


def test_complex_equality():
    arr1 = Array(_equals, 10)
    arr2 = Array(_equals, 5)
    arr1.push(1)
    arr1.push(2)
    arr2.push(1)
    arr2.push(2)
    assert arr1 == arr2

    arr1.push(3)
    arr2.push(3)
    arr1[0] = 1
    arr1[2] = 3
    assert arr1 != arr2


def test_equality_with_different_sizes_and_types():
    assert _array(1, 2) != _array(1)
    assert _array() == _array()
    assert (_array(1) == [1]) is False


def test_equality_requires_reflexive_other_equals():
    mine = _array(1)
    other = Array(lambda a, b: False)
    other.add(1)
    assert not (mine == other)


def test_str_format():
    assert str(_array(1, 2, 3)) == "[1, 2, 3]"
    assert str(_array()) == "[]"


def test_index_of_and_last_index_of():
    arr = _array(5, 6, 5, 7)
    assert arr.index_of(5) == 0
    assert arr.last_index_of(5) == 2
    assert arr.index_of(9) == -1
    assert arr.last_index_of(9) == -1


def test_first_and_last():
    arr = _array(4, 8)
    assert arr.first() == 4
    assert arr.last() == 8


def test_first_last_of_empty_raise():
    with pytest.raises(IndexError):
        Array(_equals).first()
    with pytest.raises(IndexError):
        Array(_equals).last()


def test_set_and_get():
    arr = _array(1, 2, 3)
    arr[1] = 9
    assert arr[1] == 9
    assert arr.to_list() == [1, 9, 3]


def test_push_adds_to_front_add_to_back():
    arr = Array(_equals)
    arr.add(1)
    arr.push(0)
    arr.add(2)
    assert arr.to_list() == [0, 1, 2]


def test_clear_keeps_capacity():
    arr = Array(_equals, 4)
    arr.add(1)
    arr.clear()
    assert arr.is_empty()
    assert arr.capacity == 4


def test_add_all_remove_all_retain_all():
    arr = _array(1, 2, 3)
    arr.add_all(_array(4, 5))
    assert arr.to_list() == [1, 2, 3, 4, 5]
    arr.remove_all(_array(2, 4))
    assert arr.to_list() == [1, 3, 5]
    arr.retain_all(_array(3, 5, 7))
    assert arr.to_list() == [3, 5]


def test_clone_is_independent_copy():
    arr = _array(1, 2)
    copy = arr.clone()
    copy.add(3)
    assert arr.to_list() == [1, 2]
    assert copy.to_list() == [1, 2, 3]


def test_for_each_visits_in_order():
    seen = []
    _array("a", "b").for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_array_reverses_and_converts():
    mapped = map_array(_array(1, 2, 3), str, _equals)
    assert mapped.to_list() == ["3", "2", "1"]
    assert mapped.contains("2")


def test_iterator_and_iter():
    arr = _array(1, 2, 3)
    iterator = arr.iterator()
    assert isinstance(iterator, ArrayIterator)
    assert list(iterator) == [1, 2, 3]
    assert list(arr) == [1, 2, 3]


def test_custom_equals_is_used():
    arr = Array(lambda a, b: a.lower() == b.lower())
    arr.add("Hello")
    assert arr.contains("HELLO")
    assert arr.index_of("hello") == 0


def test_list_is_abstract():
    with pytest.raises(TypeError):
        List()