"""
Capability dispatch for tapes.

The cursor never calls methods on its collection directly; it goes through the
functions below. Types that define the contract methods themselves (see
``contracts``) are called directly, even when they subclass a built-in.
Built-in containers can't grow methods, so their conformance is registered
here:

  - list, bytearray, array.array: mutable, ``set_item`` inserts (grows)
  - collections.deque: mutable, ``set_item`` inserts; refused when a bounded
    deque is already full
  - tuple, str, bytes, range: read-only
"""
from __future__ import annotations
from array import array
from collections import deque
from functools import singledispatch
from typing import Any, Optional

from ..errors import CapabilityError
from .contracts import IndexableCollection, IndexableCollectionMut


def _in_range(tape, index: int) -> bool:
    return 0 <= index < len(tape)


def _require(tape, method: str):
    fn = getattr(tape, method, None)
    if fn is None:
        raise CapabilityError(f"{type(tape).__name__} does not support {method}()")
    return fn


# -----------------------------
# Read capability
# -----------------------------

@singledispatch
def _length(tape: Any) -> int:
    return _require(tape, "length")()


@singledispatch
def _get_item(tape: Any, index: int) -> Optional[Any]:
    return _require(tape, "get_item")(index)


# -----------------------------
# Mutable capability
# -----------------------------

@singledispatch
def _get_item_mut(tape: Any, index: int) -> Optional[Any]:
    return _require(tape, "get_item_mut")(index)


@singledispatch
def _set_item(tape: Any, index: int, item: Any) -> bool:
    return bool(_require(tape, "set_item")(index, item))


@singledispatch
def _replace_item(tape: Any, index: int, item: Any) -> Optional[Any]:
    return _require(tape, "replace_item")(index, item)


@singledispatch
def _remove_item(tape: Any, index: int) -> Optional[Any]:
    return _require(tape, "remove_item")(index)


@singledispatch
def _clear(tape: Any) -> None:
    _require(tape, "clear")()


_MUTABLE_OPS = (_get_item_mut, _set_item, _replace_item, _remove_item, _clear)


def supports_mutation(tape: Any) -> bool:
    """True if every mutable capability is available for ``tape``."""
    if isinstance(tape, IndexableCollectionMut):
        return True
    return all(op.dispatch(type(tape)) is not op.dispatch(object) for op in _MUTABLE_OPS)


def supports_reading(tape: Any) -> bool:
    if isinstance(tape, IndexableCollection):
        return True
    return _length.dispatch(type(tape)) is not _length.dispatch(object)


# -----------------------------
# Public capability functions
# -----------------------------
# A tape that implements a contract itself wins over any registration for a
# built-in base class (e.g. a list subclass with its own length()).

def length(tape: Any) -> int:
    if isinstance(tape, IndexableCollection):
        return tape.length()
    return _length(tape)


def get_item(tape: Any, index: int) -> Optional[Any]:
    if isinstance(tape, IndexableCollection):
        return tape.get_item(index)
    return _get_item(tape, index)


def get_item_mut(tape: Any, index: int) -> Optional[Any]:
    if isinstance(tape, IndexableCollectionMut):
        return tape.get_item_mut(index)
    return _get_item_mut(tape, index)


def set_item(tape: Any, index: int, item: Any) -> bool:
    if isinstance(tape, IndexableCollectionMut):
        return bool(tape.set_item(index, item))
    return _set_item(tape, index, item)


def replace_item(tape: Any, index: int, item: Any) -> Optional[Any]:
    if isinstance(tape, IndexableCollectionMut):
        return tape.replace_item(index, item)
    return _replace_item(tape, index, item)


def remove_item(tape: Any, index: int) -> Optional[Any]:
    if isinstance(tape, IndexableCollectionMut):
        return tape.remove_item(index)
    return _remove_item(tape, index)


def clear(tape: Any) -> None:
    if isinstance(tape, IndexableCollectionMut):
        tape.clear()
        return
    _clear(tape)


# -----------------------------
# Built-in sequences
# -----------------------------

@_length.register(list)
@_length.register(bytearray)
@_length.register(array)
@_length.register(deque)
@_length.register(tuple)
@_length.register(str)
@_length.register(bytes)
@_length.register(range)
def _(tape) -> int:
    return len(tape)


@_get_item.register(list)
@_get_item.register(bytearray)
@_get_item.register(array)
@_get_item.register(deque)
@_get_item.register(tuple)
@_get_item.register(str)
@_get_item.register(bytes)
@_get_item.register(range)
def _(tape, index: int):
    return tape[index] if _in_range(tape, index) else None


@_get_item_mut.register(list)
@_get_item_mut.register(bytearray)
@_get_item_mut.register(array)
@_get_item_mut.register(deque)
def _(tape, index: int):
    return tape[index] if _in_range(tape, index) else None


@_set_item.register(list)
@_set_item.register(bytearray)
@_set_item.register(array)
def _(tape, index: int, item) -> bool:
    # list.insert would silently append past the end; refuse instead.
    if not (0 <= index <= len(tape)):
        return False
    tape.insert(index, item)
    return True


@_set_item.register(deque)
def _(tape: deque, index: int, item) -> bool:
    if not (0 <= index <= len(tape)):
        return False
    if tape.maxlen is not None and len(tape) >= tape.maxlen:
        return False
    tape.insert(index, item)
    return True


@_replace_item.register(list)
@_replace_item.register(bytearray)
@_replace_item.register(array)
@_replace_item.register(deque)
def _(tape, index: int, item):
    if not _in_range(tape, index):
        return None
    old = tape[index]
    tape[index] = item
    return old


@_remove_item.register(list)
@_remove_item.register(bytearray)
@_remove_item.register(array)
@_remove_item.register(deque)
def _(tape, index: int):
    if not _in_range(tape, index):
        return None
    old = tape[index]
    del tape[index]
    return old


@_clear.register(list)
@_clear.register(bytearray)
@_clear.register(deque)
def _(tape) -> None:
    tape.clear()


@_clear.register(array)
def _(tape: array) -> None:
    # array.array has no clear()
    del tape[:]
