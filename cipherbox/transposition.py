"""Transposition ciphers: keyed columnar transposition and the rail fence."""

from __future__ import annotations

from collections.abc import Iterator

from cipherbox.keyed import unique_chars


class Columnar:
    """Writes text in rows under a keyword and reads it out column by column."""

    def __init__(self, key: str) -> None:
        self.key = unique_chars(key)

    def _column_order(self) -> list[int]:
        """Column indices in the alphabetical order of their key characters."""
        if not self.key:
            raise ValueError("key must contain at least one character")
        return sorted(range(len(self.key)), key=self.key.__getitem__)

    def encrypt(self, plaintext: str) -> str:
        """Pad with spaces to a whole number of rows, then read the columns in key order."""
        order = self._column_order()
        width = len(self.key)
        remainder = len(plaintext) % width
        if remainder:
            plaintext += " " * (width - remainder)
        rows = [plaintext[start:start + width] for start in range(0, len(plaintext), width)]
        return "".join(row[col] for col in order for row in rows)

    def decrypt(self, ciphertext: str) -> str:
        """Refill the columns in key order, read the rows and trim surrounding whitespace.

        Characters beyond the last complete row are ignored.
        """
        order = self._column_order()
        width = len(self.key)
        height = len(ciphertext) // width
        columns: list[str] = [""] * width
        for position, col in enumerate(order):
            columns[col] = ciphertext[position * height:(position + 1) * height]
        return "".join("".join(row) for row in zip(*columns)).strip()


def _zigzag(rails: int, length: int) -> Iterator[int]:
    """Yield the rail each of ``length`` successive characters is written on."""
    row, down = 0, False
    for _ in range(length):
        yield row
        if row == 0 or row == rails - 1:
            down = not down
        row += 1 if down else -1


class RailFence:
    """Writes text in a zigzag across a number of rails and reads it rail by rail."""

    def __init__(self, rails: int) -> None:
        self.rails = rails

    def _reading_order(self, length: int) -> list[int]:
        rows = list(_zigzag(self.rails, length))
        return sorted(range(length), key=rows.__getitem__)

    def encrypt(self, plaintext: str) -> str:
        """Read the zigzag rail by rail; one rail or fewer leaves the text unchanged."""
        if self.rails <= 1:
            return plaintext
        return "".join(plaintext[idx] for idx in self._reading_order(len(plaintext)))

    def decrypt(self, ciphertext: str) -> str:
        """Lay the text back onto the rails and follow the zigzag."""
        if self.rails <= 1:
            return ciphertext
        result = [""] * len(ciphertext)
        for ch, idx in zip(ciphertext, self._reading_order(len(ciphertext))):
            result[idx] = ch
        return "".join(result)