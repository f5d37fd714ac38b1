"""
TeaCodec Keys
==============

Key table construction and random base key generation.
"""

from teacodec.keys.generator import generate_random_base_key
from teacodec.keys.table import (
    DEFAULT_ALPHABET,
    DEFAULT_OFFSET,
    KeyTable,
    build_key_table,
    format_key,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_OFFSET",
    "KeyTable",
    "build_key_table",
    "format_key",
    "generate_random_base_key",
]
