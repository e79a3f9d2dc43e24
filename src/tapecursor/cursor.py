from __future__ import annotations
import copy
import logging
from functools import total_ordering
from typing import Any, Generic, Optional, TypeVar

from .errors import CursorReleasedError, OutOfBoundsError
from .models.seek import Current, End, SeekFrom, Start
from .tape import capabilities as cap

logger = logging.getLogger(__name__)

Tape = TypeVar("Tape")


@total_ordering
class CollectionCursor(Generic[Tape]):
    """
    A tape (any indexable collection) plus a head position.

    The head is kept in ``0 <= position <= length``. The one way out of that
    range is shrinking the tape through ``get_mut()``; call
    ``clamp_to_collection_bounds()`` afterwards.
    """
    __slots__ = ("_inner", "_pos", "_released")

    def __init__(self, inner: Tape):
        self._inner = inner
        self._pos = 0
        self._released = False

    def _check_live(self) -> None:
        if self._released:
            raise CursorReleasedError("cursor was consumed by into_inner()")

    @property
    def _tape(self) -> Tape:
        self._check_live()
        return self._inner

    @property
    def position(self) -> int:
        """Current head position.

        Can only exceed the tape's length if the tape was shrunk via
        ``get_mut()`` and not clamped since.
        """
        self._check_live()
        return self._pos

    def remaining(self) -> int:
        return max(cap.length(self._tape) - self._pos, 0)

    # -----------------------------
    # Ownership
    # -----------------------------

    def get_ref(self) -> Tape:
        return self._tape

    def get_mut(self) -> Tape:
        """Return the tape for direct modification.

        If the tape's length changes, restore ``0 <= position <= length``
        (e.g. with ``clamp_to_collection_bounds()``) before the next read or
        write at the head. Otherwise results from this cursor are unspecified:
        seeks may fail unexpectedly and head reads may come back empty.
        """
        return self._tape

    def into_inner(self) -> Tape:
        """Hand back the tape. The cursor can't be used afterwards."""
        inner = self._tape
        self._inner = None
        self._released = True
        return inner

    # -----------------------------
    # Seeking
    # -----------------------------

    def _resolve(self, pos: SeekFrom) -> tuple[Optional[int], int]:
        # length is read fresh every time; the tape may have changed via get_mut()
        length = cap.length(self._tape)
        target = pos.candidate(self._pos, length)
        if target is not None and target > length:
            target = None
        return target, length

    def seek(self, pos: SeekFrom) -> Optional[int]:
        """
        Move the head according to ``pos``.
        Returns the new position, or None (head untouched) if the target
        falls before 0 or after the tape's length.
        """
        target, length = self._resolve(pos)
        if target is None:
            logger.debug("seek rejected: directive=%r position=%d length=%d", pos, self._pos, length)
            return None
        self._pos = target
        return target

    def seek_strict(self, pos: SeekFrom) -> int:
        """Like ``seek`` but raises OutOfBoundsError instead of returning None."""
        target, length = self._resolve(pos)
        if target is None:
            raise OutOfBoundsError(pos, self._pos, length)
        self._pos = target
        return target

    def seek_relative(self, offset: int) -> Optional[int]:
        return self.seek(Current(offset))

    def seek_forward_one(self) -> bool:
        return self.seek_relative(1) is not None

    def seek_backward_one(self) -> bool:
        return self.seek_relative(-1) is not None

    def seek_to_start(self) -> int:
        return self.seek_strict(Start(0))

    def seek_to_end(self) -> int:
        return self.seek_strict(End(0))

    def seek_to_last_item(self) -> int:
        """Move to the last item's index, or 0 when the tape is empty."""
        return self.seek_strict(Start(max(cap.length(self._tape) - 1, 0)))

    def clamp_to_collection_bounds(self) -> int:
        # positions are never negative, only the upper bound can drift
        length = cap.length(self._tape)
        if self._pos > length:
            logger.debug("clamping position %d to length %d", self._pos, length)
            self._pos = length
        return self._pos

    # -----------------------------
    # Head reads/writes
    # -----------------------------

    def get_item_at_head(self) -> Optional[Any]:
        return cap.get_item(self._tape, self._pos)

    def get_item_at_head_mut(self) -> Optional[Any]:
        return cap.get_item_mut(self._tape, self._pos)

    def set_item_at_head(self, item: Any) -> bool:
        """Write ``item`` at the head; insert vs overwrite depends on the tape."""
        return cap.set_item(self._tape, self._pos, item)

    def replace_item_at_head(self, item: Any) -> Optional[Any]:
        return cap.replace_item(self._tape, self._pos, item)

    def remove_item_at_head(self) -> Optional[Any]:
        # the head is not adjusted; it now points at whatever shifted into place
        return cap.remove_item(self._tape, self._pos)

    def clear(self) -> None:
        cap.clear(self._tape)
        logger.debug("tape cleared, position %d reset to 0", self._pos)
        self._pos = 0

    # -----------------------------
    # Value behaviour
    # -----------------------------

    def copy(self) -> "CollectionCursor[Tape]":
        """New cursor over a shallow copy of the tape, at the same position."""
        out = CollectionCursor(copy.copy(self._tape))
        out._pos = self._pos
        return out

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CollectionCursor):
            return NotImplemented
        if self._released or other._released:
            return self is other
        return self._pos == other._pos and self._inner == other._inner

    def __lt__(self, other: Any) -> bool:
        # tape first, then position; tapes must be orderable themselves
        if not isinstance(other, CollectionCursor):
            return NotImplemented
        return (self._tape, self._pos) < (other._tape, other._pos)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._released:
            return "CollectionCursor(<released>)"
        return f"CollectionCursor({self._inner!r}, position={self._pos})"
