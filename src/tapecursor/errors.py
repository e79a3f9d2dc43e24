from __future__ import annotations


class TapeCursorError(Exception):
    pass


class CapabilityError(TapeCursorError, TypeError):
    """A mutating operation was requested on a tape that is only readable."""


class CursorReleasedError(TapeCursorError, RuntimeError):
    """The cursor gave its collection away via ``into_inner`` and is no longer usable."""


class OutOfBoundsError(TapeCursorError, IndexError):
    """Raised by ``CollectionCursor.seek_strict`` when a seek resolves outside ``[0, length]``."""

    def __init__(self, directive, position: int, length: int):
        self.directive = directive
        self.position = position
        self.length = length
        super().__init__(f"seek out of bounds: {directive!r} from position {position} (length {length})")
