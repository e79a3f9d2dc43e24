import copy

import pytest

from tapecursor.tape.fixed import FixedArray


def test_new_array_is_filled():
    fa = FixedArray(4, fill=0)
    assert list(fa) == [0, 0, 0, 0]
    assert len(fa) == fa.length() == 4


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FixedArray(-1)


def test_set_item_overwrites_in_place():
    fa = FixedArray.from_iterable([1, 2, 3])
    assert fa.set_item(0, 10) is True
    assert list(fa) == [10, 2, 3]
    assert fa.set_item(3, 4) is False
    assert fa.length() == 3


def test_remove_item_resets_slot():
    fa = FixedArray.from_iterable([1, 2, 3], fill=-1)
    assert fa.remove_item(1) == 2
    assert list(fa) == [1, -1, 3]
    assert fa.remove_item(5) is None
    assert fa.length() == 3


def test_clear_keeps_length():
    fa = FixedArray.from_iterable("xyz", fill=" ")
    fa.clear()
    assert list(fa) == [" ", " ", " "]


def test_equality_copy_and_repr():
    fa = FixedArray.from_iterable([1, 2])
    dup = copy.copy(fa)
    assert dup == fa
    assert dup is not fa
    dup.set_item(0, 5)
    assert dup != fa
    assert repr(fa) == "FixedArray([1, 2], fill=None)"
