from array import array
from collections import deque

import pytest

from tapecursor.cursor import CollectionCursor
from tapecursor.errors import CapabilityError
from tapecursor.tape import capabilities as cap
from tapecursor.tape.contracts import IndexableCollection, IndexableCollectionMut
from tapecursor.tape.fixed import FixedArray


class RingLog:
    """User-defined tape that only implements the read contract."""

    def __init__(self, entries):
        self._entries = list(entries)

    def length(self):
        return len(self._entries)

    def get_item(self, index):
        return self._entries[index] if 0 <= index < len(self._entries) else None


def test_negative_index_never_wraps():
    for tape in ([1, 2], (1, 2), "ab", b"ab", range(2), deque([1, 2]), array("i", [1, 2])):
        assert cap.get_item(tape, -1) is None
        assert cap.get_item(tape, 2) is None


def test_read_only_builtins():
    for tape in ((1, 2), "ab", b"ab", range(2)):
        assert cap.supports_reading(tape)
        assert not cap.supports_mutation(tape)
        assert cap.length(tape) == 2
    assert cap.get_item("ab", 1) == "b"
    assert cap.get_item(b"ab", 0) == ord("a")


def test_mutable_builtins():
    for tape in ([1], bytearray(b"x"), deque([1]), array("i", [1])):
        assert cap.supports_mutation(tape)


def test_list_set_item_refuses_gaps():
    tape = [1, 2]
    assert cap.set_item(tape, 3, 9) is False
    assert cap.set_item(tape, -1, 9) is False
    assert tape == [1, 2]
    assert cap.set_item(tape, 2, 9) is True
    assert tape == [1, 2, 9]


def test_bounded_deque_refuses_insert_when_full():
    tape = deque([1, 2], maxlen=2)
    assert cap.set_item(tape, 0, 0) is False
    assert tape == deque([1, 2])
    assert cap.replace_item(tape, 0, 0) == 1
    assert tape == deque([0, 2])


def test_array_and_bytearray_clear():
    a = array("i", [1, 2, 3])
    cap.clear(a)
    assert len(a) == 0
    b = bytearray(b"abc")
    assert cap.remove_item(b, 1) == ord("b")
    cap.clear(b)
    assert b == bytearray()


def test_unsupported_type_raises_capability_error():
    with pytest.raises(CapabilityError):
        cap.length(object())
    assert not cap.supports_reading(object())


def test_user_defined_read_only_tape():
    log = RingLog(["boot", "ready", "halt"])
    assert isinstance(log, IndexableCollection)
    assert not isinstance(log, IndexableCollectionMut)
    assert cap.supports_reading(log)
    assert not cap.supports_mutation(log)

    cur = CollectionCursor(log)
    cur.seek_to_last_item()
    assert cur.get_item_at_head() == "halt"
    with pytest.raises(CapabilityError):
        cur.remove_item_at_head()


def test_fixed_array_satisfies_mutable_contract():
    fa = FixedArray(3)
    assert isinstance(fa, IndexableCollectionMut)
    assert cap.supports_mutation(fa)
    assert cap.length(fa) == 3


class CountedList(list):
    """list subclass that answers the read contract itself."""

    def length(self):
        return 99

    def get_item(self, index):
        return "custom"


def test_own_contract_methods_win_over_builtin_registration():
    tape = CountedList([1, 2])
    assert cap.length(tape) == 99
    assert cap.get_item(tape, 0) == "custom"
    # no mutable contract of its own, so list behaviour applies
    assert cap.set_item(tape, 2, 3) is True
    assert list(tape) == [1, 2, 3]
