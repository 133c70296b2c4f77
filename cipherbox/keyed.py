"""Keyword-driven ciphers: Substitution, Polybius square and Autokey."""

from __future__ import annotations

import re
import string

ALPHABET = string.ascii_lowercase

_NON_LOWER = re.compile(r"[^a-z]+")


def unique_chars(text: str) -> str:
    """Return ``text`` with repeated characters removed, keeping first occurrences."""
    return "".join(dict.fromkeys(text))


def keyed_alphabet(word: str, alphabet: str) -> str:
    """The distinct characters of ``word``, followed by the alphabet's remaining letters."""
    head = unique_chars(word)
    seen = set(head)
    return head + "".join(ch for ch in alphabet if ch.isalpha() and ch not in seen)


class Substitution:
    """Substitutes each letter with the letter at its position in a keyed alphabet."""

    def __init__(self, key: str) -> None:
        self.alphabet = ALPHABET
        self.key = keyed_alphabet(key, self.alphabet)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt letters after lower-casing; other characters pass through."""
        return "".join(self._map(ch, self.alphabet, self.key) for ch in plaintext.lower())

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt letters after lower-casing; other characters pass through."""
        return "".join(self._map(ch, self.key, self.alphabet) for ch in ciphertext.lower())

    @staticmethod
    def _map(ch: str, source: str, target: str) -> str:
        if not ch.isalpha():
            return ch
        idx = source.find(ch)
        if idx < 0 or idx >= len(target):
            raise ValueError(f"letter {ch!r} cannot be substituted")
        return target[idx]


class Polybius:
    """Polybius square over a keyed alphabet, with coordinates drawn from ``chars``."""

    def __init__(self, alphabet: str, key: str, chars: str) -> None:
        self.alphabet = unique_chars(alphabet)
        self.chars = unique_chars(chars)
        self.key = keyed_alphabet(key, self.alphabet)

    def encrypt(self, plaintext: str) -> str:
        """Encode each letter found in the square as a pair of coordinate characters."""
        size = len(self.chars)
        pairs = []
        for ch in plaintext.lower():
            if not ch.isalpha():
                continue
            idx = self.key.find(ch)
            if idx < 0:
                continue
            if size == 0:
                raise ValueError("coordinate characters must not be empty")
            row, col = divmod(idx, size)
            if row >= size:
                raise ValueError(f"letter {ch!r} lies outside the square")
            pairs.append(self.chars[row] + self.chars[col])
        return "".join(pairs)

    def decrypt(self, ciphertext: str) -> str:
        """Decode coordinate pairs; a trailing unpaired character is ignored."""
        letters = []
        for x, y in zip(ciphertext[0::2], ciphertext[1::2]):
            idx = self.chars.find(x) * 5 + self.chars.find(y)
            if not 0 <= idx < len(self.key):
                raise ValueError(f"pair {x + y!r} lies outside the square")
            letters.append(self.key[idx])
        return "".join(letters)


def _letters_only(text: str) -> str:
    return _NON_LOWER.sub("", text.lower())


def _shift(letter: str, offset: int) -> str:
    return chr((ord(letter) - ord("a") + offset) % 26 + ord("a"))


class Autokey:
    """Vigenère cipher whose keystream continues with the plaintext itself."""

    def __init__(self, key: str) -> None:
        self.alphabet = ALPHABET
        self.key = _letters_only(key)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt the letters of ``plaintext``; everything else is dropped."""
        text = _letters_only(plaintext)
        if len(text) < len(self.key):
            raise ValueError("plaintext is shorter than the key")
        stream = self.key + text[: len(text) - len(self.key)]
        return "".join(_shift(p, ord(k) - ord("a")) for p, k in zip(text, stream))

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt the letters of ``ciphertext``; everything else is dropped."""
        text = _letters_only(ciphertext)
        if text and not self.key:
            raise ValueError("an empty key cannot decrypt")
        stream = list(self.key)
        plain = []
        for idx, c in enumerate(text):
            p = _shift(c, -(ord(stream[idx]) - ord("a")))
            plain.append(p)
            stream.append(p)
        return "".join(plain)