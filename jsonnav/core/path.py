"""Path cursor for JSONNav.

A JSONPath walks the segments of one dot-delimited path. The segment tuple
is fixed when the path is parsed; only the cursor position moves. Cloning a
path copies the position and shares the segments, which is what lets each
object inside an array continue matching the same remaining suffix
independently of its siblings.
"""

from typing import Optional, Tuple


DEFAULT_DELIMITER = "."


class JSONPath:
    """Cursor over the ordered segments of a single path.

    Example:
        >>> jp = JSONPath("k1.k2")
        >>> jp.next()
        'k1'
        >>> jp.remainder()
        'k2'
    """

    __slots__ = ("_origin", "_keys", "_delimiter", "_position")

    def __init__(self, path: str, delimiter: str = DEFAULT_DELIMITER):
        """Parse a path string into segments.

        Args:
            path: Delimited path string, e.g. "k1.k2"
            delimiter: Segment separator (default ".")

        Raises:
            ValueError: If path is None or delimiter is empty
        """
        if path is None:
            raise ValueError("path cannot be None")
        if not delimiter:
            raise ValueError("delimiter cannot be empty")
        self._origin = path
        self._delimiter = delimiter
        self._keys: Tuple[str, ...] = tuple(path.split(delimiter)) if path else ()
        self._position = 0

    def has_next(self) -> bool:
        """Check if there are unconsumed segments."""
        return self._position < len(self._keys)

    def next(self) -> str:
        """Consume and return the next segment.

        Raises:
            IndexError: If all segments have been consumed
        """
        if not self.has_next():
            raise IndexError(f"path exhausted: '{self._origin}'")
        key = self._keys[self._position]
        self._position += 1
        return key

    def has_prev(self) -> bool:
        """Check if at least one segment has been consumed."""
        return self._position > 0

    def curr(self) -> Optional[str]:
        """Return the most recently consumed segment, or None."""
        if not self.has_prev():
            return None
        return self._keys[self._position - 1]

    def origin(self) -> str:
        """Return the full path string this cursor was built from."""
        return self._origin

    def keys(self) -> Tuple[str, ...]:
        return self._keys

    def position(self) -> int:
        return self._position

    def delimiter(self) -> str:
        return self._delimiter

    def current_path(self) -> str:
        """Return the consumed prefix of the path, e.g. "k1" for "k1.k2"."""
        return self._delimiter.join(self._keys[:self._position])

    def remainder(self) -> str:
        """Return the unconsumed suffix of the path."""
        return self._delimiter.join(self._keys[self._position:])

    def clone(self) -> "JSONPath":
        """Copy this cursor.

        The clone shares the segment tuple and starts at the same position.
        Advancing either cursor does not move the other.
        """
        twin = JSONPath.__new__(JSONPath)
        twin._origin = self._origin
        twin._delimiter = self._delimiter
        twin._keys = self._keys
        twin._position = self._position
        return twin

    __copy__ = clone

    def __len__(self) -> int:
        return len(self._keys)

    def __str__(self) -> str:
        return self._origin

    def __repr__(self) -> str:
        return f"JSONPath({self._origin!r}, position={self._position})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSONPath):
            return NotImplemented
        return (self._keys == other._keys
                and self._position == other._position)
