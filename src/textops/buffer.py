"""
Mutable string buffer.

Python strings are immutable, so the buffer keeps its characters in a list and
tracks a nominal capacity the same way a classic growable string buffer does.
"""


class TextOpsError(Exception):
    """Base exception for text operation errors."""

    pass


class BufferIndexError(TextOpsError, IndexError):
    """Raised when an index or range falls outside the buffer."""

    pass


DEFAULT_EXTRA_CAPACITY = 16


class StringBuffer:
    """
    A mutable sequence of characters.

    Mutating methods return the buffer itself so calls can be chained:

        StringBuffer("abc").append("def").reverse().to_string()  # 'fedcba'
    """

    def __init__(self, initial: str = "") -> None:
        """
        Initialize the buffer.

        Args:
            initial: Initial contents (default: empty)
        """
        self._chars: list[str] = list(initial)
        self._capacity = len(self._chars) + DEFAULT_EXTRA_CAPACITY

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"StringBuffer({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringBuffer):
            return NotImplemented
        return self._chars == other._chars

    __hash__ = None  # mutable

    def length(self) -> int:
        """Number of characters currently held."""
        return len(self._chars)

    def capacity(self) -> int:
        """Number of characters the buffer can hold before it has to grow."""
        return self._capacity

    def to_string(self) -> str:
        return str(self)

    def ensure_capacity(self, minimum: int) -> None:
        """
        Grow the capacity to at least ``minimum``.

        New capacity is the larger of ``minimum`` and twice the old capacity plus two.
        """
        if minimum > self._capacity:
            self._capacity = max(minimum, self._capacity * 2 + 2)

    def trim_to_size(self) -> None:
        """Shrink the capacity to the current length."""
        self._capacity = len(self._chars)

    def char_at(self, index: int) -> str:
        self._check_index(index)
        return self._chars[index]

    def set_char_at(self, index: int, ch: str) -> "StringBuffer":
        """
        Replace the character at ``index``.

        Raises:
            BufferIndexError: If index is out of range
            ValueError: If ``ch`` is not exactly one character
        """
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"Expected a single character, got: {ch!r}")
        self._check_index(index)
        self._chars[index] = ch
        return self

    def set_length(self, new_length: int) -> "StringBuffer":
        """Truncate, or pad with NUL characters, to ``new_length``."""
        if new_length < 0:
            raise BufferIndexError(f"Length must not be negative: {new_length}")
        self.ensure_capacity(new_length)
        if new_length < len(self._chars):
            del self._chars[new_length:]
        else:
            self._chars.extend("\0" * (new_length - len(self._chars)))
        return self

    def append(self, value: object) -> "StringBuffer":
        text = value if isinstance(value, str) else str(value)
        self.ensure_capacity(len(self._chars) + len(text))
        self._chars.extend(text)
        return self

    def insert(self, offset: int, value: object) -> "StringBuffer":
        """
        Insert ``value`` before position ``offset``.

        ``offset`` may equal the length, which appends.
        """
        if offset < 0 or offset > len(self._chars):
            raise BufferIndexError(f"Offset {offset} out of range for length {len(self._chars)}")
        text = value if isinstance(value, str) else str(value)
        self.ensure_capacity(len(self._chars) + len(text))
        self._chars[offset:offset] = text
        return self

    def delete(self, start: int, end: int) -> "StringBuffer":
        """
        Remove characters in ``[start, end)``.

        ``end`` is clamped to the length of the buffer.
        """
        end = min(end, len(self._chars))
        self._check_range(start, end)
        del self._chars[start:end]
        return self

    def delete_char_at(self, index: int) -> "StringBuffer":
        self._check_index(index)
        del self._chars[index]
        return self

    def replace(self, start: int, end: int, value: str) -> "StringBuffer":
        """Replace ``[start, end)`` with ``value``; ``end`` is clamped to the length."""
        end = min(end, len(self._chars))
        self._check_range(start, end)
        self.ensure_capacity(len(self._chars) - (end - start) + len(value))
        self._chars[start:end] = value
        return self

    def reverse(self) -> "StringBuffer":
        self._chars.reverse()
        return self

    def index_of(self, text: str, from_index: int = 0) -> int:
        """Index of the first occurrence of ``text`` at or after ``from_index``, or -1."""
        return str(self).find(text, max(from_index, 0))

    def last_index_of(self, text: str) -> int:
        """Index of the last occurrence of ``text``, or -1."""
        return str(self).rfind(text)

    def substring(self, start: int, end: int | None = None) -> str:
        if end is None:
            end = len(self._chars)
        if end > len(self._chars):
            raise BufferIndexError(f"End {end} out of range for length {len(self._chars)}")
        self._check_range(start, end)
        return "".join(self._chars[start:end])

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._chars):
            raise BufferIndexError(f"Index {index} out of range for length {len(self._chars)}")

    def _check_range(self, start: int, end: int) -> None:
        # end has already been clamped to the length where clamping applies
        if start < 0 or start > end:
            raise BufferIndexError(f"Invalid range [{start}, {end}) for length {len(self._chars)}")
