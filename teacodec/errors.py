"""
TeaCodec Errors
================

Exception hierarchy for configuration and encoding failures. Every error
is an input error: it carries an HTTP-style ``status_code`` of 400 and a
machine-readable ``kind`` so callers outside HTTP can map it to a generic
"invalid input" category.
"""

from __future__ import annotations


class TeaCodecError(ValueError):
    """Base class for all codec input errors."""

    status_code: int = 400
    kind: str = "invalid_argument"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {
            "error": self.kind,
            "status_code": self.status_code,
            "message": self.message,
        }


class InvalidAlphabet(TeaCodecError):
    """Alphabet is empty, not a string, or contains non-ASCII characters."""

    kind = "invalid_alphabet"


class InvalidOffset(TeaCodecError):
    """Offset is negative or not an integer."""

    kind = "invalid_offset"


class KeySpaceTooSmall(TeaCodecError):
    """``offset + len(alphabet)`` is below 100."""

    kind = "key_space_too_small"


class KeySpaceTooLarge(TeaCodecError):
    """``offset + len(alphabet)`` is above 999."""

    kind = "key_space_too_large"


class UnmappableCharacter(TeaCodecError):
    """A character passed to encode has no key in the current table."""

    kind = "unmappable_character"

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f'Character "{character}" not found in base key')
        self.character = character
        self.position = position

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data["character"] = self.character
        data["position"] = self.position
        return data


class InvalidLength(TeaCodecError):
    """Random key length outside [1, 1000]."""

    kind = "invalid_length"
