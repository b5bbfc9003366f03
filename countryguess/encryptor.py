"""A simple repeating-key XOR scrambler with five keys of distinct lengths."""

from __future__ import annotations

import random
from typing import Optional, Union

KEY_COUNT = 5
MIN_KEY_SIZE = 2
MAX_KEY_SIZE = 8

BytesLike = Union[bytes, bytearray, memoryview]


class Encryptor:
    """XORs data with several repeating keys; applying it twice restores the input."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self.keys: list[bytes] = [b""] * KEY_COUNT
        self.regenerate_keys()

    def regenerate_keys(self) -> None:
        """Draw new keys, each with a length no current key has."""
        for index in range(KEY_COUNT):
            taken = {len(key) for key in self.keys}
            size = self._rng.randint(MIN_KEY_SIZE, MAX_KEY_SIZE)
            while size in taken:
                size = self._rng.randint(MIN_KEY_SIZE, MAX_KEY_SIZE)
            self.keys[index] = bytes(self._rng.randrange(256) for _ in range(size))

    def encrypt(self, data: BytesLike) -> bytes:
        """Return ``data`` XORed with every key in turn."""
        result = bytearray(data)
        for key in self.keys:
            size = len(key)
            for i, _ in enumerate(result):
                result[i] ^= key[i % size]
        return bytes(result)

    def decrypt(self, data: BytesLike) -> bytes:
        """Undo :meth:`encrypt`."""
        return self.encrypt(data)

    def __str__(self) -> str:
        return "".join(
            f"keys[{i}] = {{ " + ", ".join(str(b) for b in key) + " }\n"
            for i, key in enumerate(self.keys)
        )