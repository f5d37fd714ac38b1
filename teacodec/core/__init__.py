"""
TeaCodec Core Module
=====================

Contains the codec engine and its data models.
"""

from teacodec.core.engine import TeaCodec
from teacodec.core.models import (
    CodecResult,
    GeneratedKey,
    KeyTableEntry,
    KeyTableSummary,
    Operation,
    RoundTripResult,
)

__all__ = [
    "CodecResult",
    "GeneratedKey",
    "KeyTableEntry",
    "KeyTableSummary",
    "Operation",
    "RoundTripResult",
    "TeaCodec",
]
