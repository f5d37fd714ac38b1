"""
Random Base Key Generator
==========================

Produces random alphabets for :func:`teacodec.keys.table.build_key_table`.
The output is standard base64 text drawn from a CSPRNG, so every
character is printable ASCII and passes the alphabet check. Repeated
characters are likely in longer keys; they follow the usual
last-occurrence-wins rule once the key is configured.
"""

from __future__ import annotations

import base64
import secrets

from teacodec.errors import InvalidLength

MIN_LENGTH: int = 1
MAX_LENGTH: int = 1000
DEFAULT_LENGTH: int = 64

BASE64_ALPHABET: str = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)


def generate_random_base_key(length: int = DEFAULT_LENGTH) -> str:
    """Return *length* characters of base64-encoded random bytes.

    Raises:
        InvalidLength: If *length* is not an integer in [1, 1000].
    """
    if (
        isinstance(length, bool)
        or not isinstance(length, int)
        or not MIN_LENGTH <= length <= MAX_LENGTH
    ):
        raise InvalidLength(
            f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}"
        )
    # base64 of n bytes is at least n characters long.
    encoded = base64.b64encode(secrets.token_bytes(length)).decode("ascii")
    return encoded[:length]
