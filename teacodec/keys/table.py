"""
Key Table Builder
==================

Validates a base alphabet and numeric offset and builds the pair of
lookup tables the codec runs on:

    forward : int key   -> character   (used by decode)
    inverse : character -> "NNN" code  (used by encode)

Keys are consecutive integers starting at ``offset``; each one is
rendered as a zero-padded three-digit decimal code. Because
``offset + len(alphabet)`` is confined to [100, 999], every code is
exactly three characters wide and an encoded stream splits into
fixed-width groups without separators.

When a character occurs more than once in the alphabet, the inverse
table keeps the key of its last occurrence. Earlier keys stay in the
forward table and still decode, but encode never produces them.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from teacodec.errors import (
    InvalidAlphabet,
    InvalidOffset,
    KeySpaceTooLarge,
    KeySpaceTooSmall,
)

DEFAULT_ALPHABET: str = (
    "abcdefghijklmnopqrstuvwxyz0123456789;`</>- |_=,.:"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ\\/ "
)
DEFAULT_OFFSET: int = 105

CODE_WIDTH: int = 3
MIN_KEY_SPACE: int = 100
MAX_KEY_SPACE: int = 999


def format_key(key: int) -> str:
    """Render an integer key as its fixed-width decimal code (7 -> ``"007"``)."""
    return f"{key:0{CODE_WIDTH}d}"


@dataclass(frozen=True, slots=True)
class KeyTable:
    """Immutable forward/inverse table pair built from one configuration.

    Instances are never mutated after construction; reconfiguring a codec
    swaps in a whole new ``KeyTable``.
    """

    alphabet: str
    offset: int
    forward: Mapping[int, str]
    inverse: Mapping[str, str]
    codes: Mapping[str, str]

    @property
    def first_key(self) -> int:
        return self.offset

    @property
    def last_key(self) -> int:
        return self.offset + len(self.alphabet) - 1

    @property
    def shadowed_keys(self) -> list[int]:
        """Forward keys whose character encodes to a later key."""
        return [
            key for key, char in self.forward.items()
            if self.inverse[char] != format_key(key)
        ]

    def lookup_code(self, code: str) -> str | None:
        """Return the character for a three-digit *code*, or ``None``."""
        return self.codes.get(code)

    def __len__(self) -> int:
        return len(self.forward)


def _normalise_offset(offset: object) -> int:
    # bool is an int subclass but never a meaningful offset
    if isinstance(offset, bool):
        raise InvalidOffset("Offset key must be a non-negative integer")
    if isinstance(offset, float):
        if not offset.is_integer():
            raise InvalidOffset("Offset key must be a non-negative integer")
        offset = int(offset)
    if not isinstance(offset, int) or offset < 0:
        raise InvalidOffset("Offset key must be a non-negative integer")
    return offset


def build_key_table(alphabet: str, offset: int = DEFAULT_OFFSET) -> KeyTable:
    """Validate *alphabet* and *offset* and build a :class:`KeyTable`.

    Checks run in a fixed order and the first violation is raised:

    1. empty, non-string, or non-ASCII alphabet -> :class:`InvalidAlphabet`
    2. negative or non-integral offset          -> :class:`InvalidOffset`
    3. ``offset + len(alphabet) < 100``         -> :class:`KeySpaceTooSmall`
    4. ``offset + len(alphabet) > 999``         -> :class:`KeySpaceTooLarge`

    Args:
        alphabet: Ordered characters to assign keys to.
        offset: First key number.

    Returns:
        A new, fully-built :class:`KeyTable`.
    """
    if not isinstance(alphabet, str) or not alphabet or not alphabet.isascii():
        raise InvalidAlphabet("Default base key must be a non-empty ASCII string")

    offset = _normalise_offset(offset)

    key_space = offset + len(alphabet)
    if key_space < MIN_KEY_SPACE:
        raise KeySpaceTooSmall(
            "Default base key is too small; resulting key length must be "
            f"at least {MIN_KEY_SPACE}"
        )
    if key_space > MAX_KEY_SPACE:
        raise KeySpaceTooLarge(
            "Default base key is too big; resulting key length must be "
            f"at most {MAX_KEY_SPACE}"
        )

    forward: dict[int, str] = {}
    for position, char in enumerate(alphabet):
        forward[offset + position] = char

    # Ascending key order, so a repeated character keeps its last key.
    inverse = {char: format_key(key) for key, char in forward.items()}
    codes = {format_key(key): char for key, char in forward.items()}

    return KeyTable(
        alphabet=alphabet,
        offset=offset,
        forward=MappingProxyType(forward),
        inverse=MappingProxyType(inverse),
        codes=MappingProxyType(codes),
    )
