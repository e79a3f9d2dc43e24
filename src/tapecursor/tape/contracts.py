from __future__ import annotations
from typing import Optional, Protocol, TypeVar, runtime_checkable

Item = TypeVar("Item")


@runtime_checkable
class IndexableCollection(Protocol[Item]):
    """Read access a tape must provide to be wrapped by a cursor.

    ``get_item(i)`` returns an item iff ``0 <= i < length()``; negative
    indices never wrap around.
    """

    def length(self) -> int: ...

    def get_item(self, index: int) -> Optional[Item]: ...


@runtime_checkable
class IndexableCollectionMut(IndexableCollection[Item], Protocol[Item]):
    """Mutable access; unlocks the cursor's write operations.

    Whether ``set_item`` inserts or overwrites is up to the implementation.
    Out-of-range indices are a no-op (``False`` / ``None``).
    """

    def get_item_mut(self, index: int) -> Optional[Item]: ...

    def set_item(self, index: int, item: Item) -> bool: ...

    def replace_item(self, index: int, item: Item) -> Optional[Item]: ...

    def remove_item(self, index: int) -> Optional[Item]: ...

    def clear(self) -> None: ...
