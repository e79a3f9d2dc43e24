from __future__ import annotations
from functools import total_ordering
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter
from pydantic_core import PydanticUndefined

# Index width of the positions a cursor can address (unsigned 64-bit) and of
# the signed offsets used by End/Current.
INDEX_MAX = 2**64 - 1
OFFSET_MIN = -(2**63)
OFFSET_MAX = 2**63 - 1


def checked_add_signed(base: int, offset: int) -> Optional[int]:
    """Add a signed offset to an index; None if the result leaves [0, INDEX_MAX]."""
    result = base + offset
    if result < 0 or result > INDEX_MAX:
        return None
    return result


@total_ordering
class _Directive(BaseModel):
    # Ordered by kind (Start < End < Current), then by value.
    model_config = ConfigDict(frozen=True)

    def _sort_key(self) -> tuple[int, int]:
        raise NotImplementedError

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, _Directive):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def candidate(self, position: int, length: int) -> Optional[int]:
        raise NotImplementedError


class Start(_Directive):
    """Seek to an absolute index.

    ``Start(0)`` is the first item, ``Start(5)`` the sixth.
    """
    kind: Literal["start"] = "start"
    index: StrictInt = Field(..., ge=0, le=INDEX_MAX)

    def __init__(self, index: Any = PydanticUndefined, /, **data: Any):
        if index is not PydanticUndefined:
            data["index"] = index
        super().__init__(**data)

    def _sort_key(self) -> tuple[int, int]:
        return 0, self.index

    def candidate(self, position: int, length: int) -> Optional[int]:
        return self.index


class End(_Directive):
    """Seek relative to the collection's length.

    ``End(0)`` is the slot just past the last item, ``End(-1)`` the last item.
    """
    kind: Literal["end"] = "end"
    offset: StrictInt = Field(..., ge=OFFSET_MIN, le=OFFSET_MAX)

    def __init__(self, offset: Any = PydanticUndefined, /, **data: Any):
        if offset is not PydanticUndefined:
            data["offset"] = offset
        super().__init__(**data)

    def _sort_key(self) -> tuple[int, int]:
        return 1, self.offset

    def candidate(self, position: int, length: int) -> Optional[int]:
        return checked_add_signed(length, self.offset)


class Current(_Directive):
    """Seek relative to the cursor's current position. ``Current(0)`` stays put."""
    kind: Literal["current"] = "current"
    offset: StrictInt = Field(..., ge=OFFSET_MIN, le=OFFSET_MAX)

    def __init__(self, offset: Any = PydanticUndefined, /, **data: Any):
        if offset is not PydanticUndefined:
            data["offset"] = offset
        super().__init__(**data)

    def _sort_key(self) -> tuple[int, int]:
        return 2, self.offset

    def candidate(self, position: int, length: int) -> Optional[int]:
        return checked_add_signed(position, self.offset)


SeekFrom = Annotated[Union[Start, End, Current], Field(discriminator="kind")]

_SEEK_FROM = TypeAdapter(SeekFrom)


def parse_seek_from(data: Any) -> Union[Start, End, Current]:
    """Build a directive from a mapping such as ``{"kind": "end", "offset": -1}``."""
    return _SEEK_FROM.validate_python(data)
