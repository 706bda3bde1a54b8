"""The single-line input field: a UTF-8 byte buffer with a cursor."""

from __future__ import annotations

BUFSIZ = 8192


class LineBuffer:
    """Editable text whose cursor is a byte offset into its UTF-8 encoding."""

    def __init__(
        self, text: str = "", word_delimiters: str = " ", capacity: int = BUFSIZ - 1
    ) -> None:
        self._data = bytearray()
        self.cursor = 0
        self.word_delimiters = word_delimiters.encode()
        self.capacity = capacity
        if text:
            self.insert(text)

    @property
    def raw(self) -> bytes:
        return bytes(self._data)

    @property
    def text(self) -> str:
        return self._data.decode("utf-8", "replace")

    @property
    def at_end(self) -> bool:
        return self.cursor >= len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.text

    def _byte(self, pos: int) -> int:
        return self._data[pos] if 0 <= pos < len(self._data) else 0

    def _is_delimiter(self, byte: int) -> bool:
        return byte in self.word_delimiters

    def insert(self, data: str | bytes) -> bool:
        """Insert at the cursor; return False and change nothing if it would not fit."""
        if isinstance(data, str):
            data = data.encode()
        if len(self._data) + len(data) > self.capacity:
            return False
        self._data[self.cursor:self.cursor] = data
        self.cursor += len(data)
        return True

    def remove_before(self, count: int) -> None:
        """Delete ``count`` bytes before the cursor."""
        if count < 0 or count > self.cursor:
            raise ValueError(f"cannot remove {count} bytes before offset {self.cursor}")
        del self._data[self.cursor - count:self.cursor]
        self.cursor -= count

    def replace(self, text: str) -> None:
        """Replace the whole content, truncated to capacity, and put the cursor at the end."""
        self._data = bytearray(text.encode()[: self.capacity])
        self.cursor = len(self._data)

    def next_rune(self, inc: int) -> int:
        """Return the offset of the next UTF-8 character start in direction ``inc`` (+1 or -1)."""
        pos = self.cursor + inc
        while pos + inc >= 0 and (self._byte(pos) & 0xC0) == 0x80:
            pos += inc
        return pos

    def move_word_edge(self, direction: int) -> None:
        """Move the cursor to the start (direction < 0) or end of a word."""
        if direction < 0:
            while self.cursor > 0 and self._is_delimiter(self._byte(self.next_rune(-1))):
                self.cursor = self.next_rune(-1)
            while self.cursor > 0 and not self._is_delimiter(self._byte(self.next_rune(-1))):
                self.cursor = self.next_rune(-1)
        else:
            while not self.at_end and self._is_delimiter(self._byte(self.cursor)):
                self.cursor = self.next_rune(+1)
            while not self.at_end and not self._is_delimiter(self._byte(self.cursor)):
                self.cursor = self.next_rune(+1)

    def kill_line_end(self) -> None:
        """Delete everything from the cursor to the end."""
        if self.at_end:
            return
        self._data = self._data[: self.cursor]

    def kill_line_start(self) -> None:
        """Delete everything before the cursor."""
        self.remove_before(self.cursor)

    def kill_word(self) -> None:
        """Delete the word before the cursor together with delimiters after it."""
        while self.cursor > 0 and self._is_delimiter(self._byte(self.next_rune(-1))):
            self.remove_before(self.cursor - self.next_rune(-1))
        while self.cursor > 0 and not self._is_delimiter(self._byte(self.next_rune(-1))):
            self.remove_before(self.cursor - self.next_rune(-1))

    def backspace(self) -> bool:
        """Delete the character before the cursor; False if there is none."""
        if self.cursor == 0:
            return False
        self.remove_before(self.cursor - self.next_rune(-1))
        return True

    def delete_forward(self) -> bool:
        """Delete the character under the cursor; False if at the end."""
        if self.at_end:
            return False
        self.cursor = self.next_rune(+1)
        return self.backspace()