from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class FixedArray(Generic[T]):
    """
    Array whose length is set at construction and never changes.

    Satisfies the mutable tape contract with overwrite semantics:
      - set_item overwrites in place (no insertion, no growth)
      - remove_item hands back the item and resets its slot to ``fill``
      - clear resets every slot to ``fill``
    """
    __slots__ = ("_items", "fill")

    def __init__(self, size: int, fill: Optional[T] = None):
        if size < 0:
            raise ValueError("size must be >= 0")
        self.fill = fill
        self._items: List[Optional[T]] = [fill] * size

    @classmethod
    def from_iterable(cls, items: Iterable[T], fill: Optional[T] = None) -> "FixedArray[T]":
        values = list(items)
        out = cls(len(values), fill=fill)
        out._items[:] = values
        return out

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    # read capability
    def length(self) -> int: return len(self._items)

    def get_item(self, index: int) -> Optional[T]:
        return self._items[index] if self._in_range(index) else None

    # mutable capability
    def get_item_mut(self, index: int) -> Optional[T]:
        return self.get_item(index)

    def set_item(self, index: int, item: T) -> bool:
        if not self._in_range(index):
            return False
        self._items[index] = item
        return True

    def replace_item(self, index: int, item: T) -> Optional[T]:
        if not self._in_range(index):
            return None
        old = self._items[index]
        self._items[index] = item
        return old

    def remove_item(self, index: int) -> Optional[T]:
        return self.replace_item(index, self.fill)

    def clear(self) -> None:
        self._items[:] = [self.fill] * len(self._items)

    def __len__(self) -> int: return len(self._items)
    def __iter__(self) -> Iterator[Optional[T]]: return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FixedArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "FixedArray[T]":
        return FixedArray.from_iterable(self._items, fill=self.fill)

    def __repr__(self) -> str:
        return f"FixedArray({self._items!r}, fill={self.fill!r})"
