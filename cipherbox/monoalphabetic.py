"""Single-alphabet substitution ciphers: Affine, Atbash, Caesar and ROT13."""

from __future__ import annotations

import re
import string

PLAIN_ALPHABET = string.ascii_lowercase

_STRIP_PATTERN = re.compile(r"[^a-zA-Z0-9\t\n\f\r ]+")


def clean(text: str) -> str:
    """Trim, lower-case and drop everything but letters, digits and whitespace."""
    return _STRIP_PATTERN.sub("", text.strip().lower())


def _wrap(value: int) -> int:
    """Reduce ``value`` into the alphabet, refusing results that fall below zero."""
    if value < 0 and value % len(PLAIN_ALPHABET):
        raise ValueError(f"alphabet position {value} is out of range")
    return value % len(PLAIN_ALPHABET)


class MonoalphabeticCipher:
    """Maps each plain letter to the letter at the same place in a cipher alphabet."""

    def __init__(self, cipher_alphabet: str) -> None:
        if len(cipher_alphabet) != len(PLAIN_ALPHABET):
            raise ValueError("cipher alphabet must have 26 letters")
        self.cipher_alphabet = cipher_alphabet
        self._encode = dict(zip(PLAIN_ALPHABET, cipher_alphabet))
        self._decode: dict[str, str] = {}
        for plain, cipher in zip(PLAIN_ALPHABET, cipher_alphabet):
            self._decode.setdefault(cipher, plain)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt the cleaned text; digits and whitespace pass through."""
        return "".join(self._encode.get(ch, ch) for ch in clean(plaintext))

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt the cleaned text; digits and whitespace pass through."""
        return "".join(self._decode_char(ch) for ch in clean(ciphertext))

    def _decode_char(self, ch: str) -> str:
        if ch not in PLAIN_ALPHABET:
            return ch
        try:
            return self._decode[ch]
        except KeyError:
            raise ValueError(f"letter {ch!r} does not occur in the cipher alphabet") from None


class Affine(MonoalphabeticCipher):
    """Letter at position i becomes the letter at (scale * i + shift) mod 26."""

    def __init__(self, scale: int, shift: int) -> None:
        self.scale = scale
        self.shift = shift
        super().__init__(
            "".join(
                PLAIN_ALPHABET[_wrap(scale * idx + shift)]
                for idx in range(len(PLAIN_ALPHABET))
            )
        )


class Atbash(MonoalphabeticCipher):
    """The alphabet reversed."""

    def __init__(self) -> None:
        super().__init__(PLAIN_ALPHABET[::-1])


class Caesar(MonoalphabeticCipher):
    """The alphabet rotated by a fixed shift."""

    def __init__(self, shift: int) -> None:
        self.shift = shift
        super().__init__(
            "".join(
                PLAIN_ALPHABET[_wrap(idx + shift)] for idx in range(len(PLAIN_ALPHABET))
            )
        )


class ROT13(MonoalphabeticCipher):
    """The alphabet rotated by thirteen places."""

    def __init__(self) -> None:
        super().__init__(PLAIN_ALPHABET[13:] + PLAIN_ALPHABET[:13])