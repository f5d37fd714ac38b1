"""
TeaCodec Data Models
=====================

Pydantic models describing codec results and key table summaries. They
serialise to JSON for the CLI's ``--output json`` mode and the report
writer.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Operation(str, enum.Enum):
    """Codec operation that produced a result."""

    ENCODE = "encode"
    DECODE = "decode"


class CodecResult(BaseModel):
    """Outcome of a single encode or decode call.

    Attributes:
        operation: Which transform ran.
        input: Text passed to the codec.
        output: Text the codec returned.
        offset: Offset of the key table in use.
        alphabet_size: Length of the configured alphabet.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation
    input: str
    output: str
    offset: int = Field(..., ge=0)
    alphabet_size: int = Field(..., ge=1)


class KeyTableEntry(BaseModel):
    """One forward-table row."""

    model_config = ConfigDict(frozen=True)

    key: int
    code: str = Field(..., min_length=3, max_length=3)
    character: str = Field(..., min_length=1, max_length=1)
    shadowed: bool = False


class KeyTableSummary(BaseModel):
    """Description of a configured key table.

    ``shadowed_codes`` lists codes whose character also appears later in
    the alphabet; they decode but are never produced by encode.
    """

    model_config = ConfigDict(frozen=True)

    offset: int
    alphabet_size: int
    first_key: int
    last_key: int
    distinct_characters: int
    shadowed_codes: list[str] = Field(default_factory=list)
    entries: list[KeyTableEntry] = Field(default_factory=list)


class GeneratedKey(BaseModel):
    """A random base key produced by the generator."""

    model_config = ConfigDict(frozen=True)

    key: str
    length: int = Field(..., ge=1, le=1000)
    encoding: str = "base64"


class RoundTripResult(BaseModel):
    """Encode followed by decode of the same text."""

    model_config = ConfigDict(frozen=True)

    encoded: CodecResult
    decoded: CodecResult

    @computed_field  # type: ignore[prop-decorator]
    @property
    def matches(self) -> bool:
        return self.decoded.output == self.encoded.input
