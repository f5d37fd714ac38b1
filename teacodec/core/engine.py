"""
TeaCodec Engine
================

:class:`TeaCodec` is the facade over the key table builder and the
encode/decode transforms.

    encode: every character becomes its three-digit code; a character
            missing from the table aborts the call with
            :class:`~teacodec.errors.UnmappableCharacter`.
    decode: the input is cut into three-character groups and each group
            that matches a code yields its character. Unmatched groups,
            including a short trailing group, contribute nothing and
            never raise.

The active :class:`~teacodec.keys.table.KeyTable` is held in a single
attribute. ``configure`` builds the new table completely before
assigning it, and each transform reads the attribute once, so a codec
shared across threads never exposes a half-built table.
"""

from __future__ import annotations

from typing import Optional

from shared.config import TeaConfig
from shared.logger import TeaLogger

from teacodec.core.models import (
    CodecResult,
    KeyTableEntry,
    KeyTableSummary,
    Operation,
)
from teacodec.errors import UnmappableCharacter
from teacodec.keys.generator import DEFAULT_LENGTH, generate_random_base_key
from teacodec.keys.table import (
    CODE_WIDTH,
    DEFAULT_ALPHABET,
    DEFAULT_OFFSET,
    KeyTable,
    build_key_table,
    format_key,
)


class TeaCodec:
    """Reversible positional substitution codec.

    Usage::

        codec = TeaCodec()
        encoded = codec.encode("Original Text 1337")
        assert codec.decode(encoded) == "Original Text 1337"

    Args:
        alphabet: Base alphabet; defaults to :data:`DEFAULT_ALPHABET`.
        offset: First key number; defaults to 105.
        logger: Diagnostic logger. A new one is created if not provided.

    Raises:
        TeaCodecError: Any validation error raised by :meth:`configure`.
    """

    def __init__(
        self,
        alphabet: str = DEFAULT_ALPHABET,
        offset: int = DEFAULT_OFFSET,
        *,
        logger: Optional[TeaLogger] = None,
    ) -> None:
        self._logger: TeaLogger = logger or TeaLogger("engine")
        self._table: KeyTable
        self.configure(alphabet, offset)

    @classmethod
    def from_config(
        cls,
        config: Optional[TeaConfig] = None,
        logger: Optional[TeaLogger] = None,
    ) -> TeaCodec:
        """Build a codec from the ``[codec]`` section of *config*.

        Unset alphabet or offset fall back to the key table defaults.
        """
        codec_config = (config or TeaConfig()).codec
        alphabet = codec_config.alphabet
        offset = codec_config.offset
        return cls(
            DEFAULT_ALPHABET if alphabet is None else alphabet,
            DEFAULT_OFFSET if offset is None else offset,
            logger=logger,
        )

    # ------------------------------------------------------------------ #
    #  Configuration
    # ------------------------------------------------------------------ #

    def configure(self, alphabet: str, offset: int = DEFAULT_OFFSET) -> None:
        """Replace the key table with one built from *alphabet* and *offset*.

        On failure the previous table stays in place.
        """
        with self._logger.operation("configure"):
            self._logger.debug("Setting base key...")
            with self._logger.timed("build key table"):
                table = build_key_table(alphabet, offset)
            previous = getattr(self, "_table", None)
            self._table = table
            self._logger.debug(
                "Base key successfully set",
                offset=table.offset,
                alphabet_size=len(table.alphabet),
            )
            if previous is not None:
                self._logger.info(
                    "Key table replaced: keys %d-%d -> %d-%d",
                    previous.first_key,
                    previous.last_key,
                    table.first_key,
                    table.last_key,
                )

    @property
    def table(self) -> KeyTable:
        return self._table

    @property
    def alphabet(self) -> str:
        return self._table.alphabet

    @property
    def offset(self) -> int:
        return self._table.offset

    # ------------------------------------------------------------------ #
    #  Transforms
    # ------------------------------------------------------------------ #

    def encode(self, text: str) -> str:
        """Encode *text* as a string of three-digit codes.

        Raises:
            UnmappableCharacter: A character of *text* is not in the table.
        """
        return self._encode(self._table, text)

    def decode(self, text: str) -> str:
        """Decode three-digit groups of *text*, dropping any that do not match."""
        return self._decode(self._table, text)

    def transform(self, operation: Operation, text: str) -> CodecResult:
        """Run *operation* and wrap the outcome in a :class:`CodecResult`."""
        table = self._table
        operation = Operation(operation)
        if operation is Operation.ENCODE:
            output = self._encode(table, text)
        else:
            output = self._decode(table, text)
        return CodecResult(
            operation=operation,
            input=text,
            output=output,
            offset=table.offset,
            alphabet_size=len(table.alphabet),
        )

    def _encode(self, table: KeyTable, text: str) -> str:
        with self._logger.operation("encode"):
            self._logger.debug("Encrypting text...", length=len(text))
            codes: list[str] = []
            for position, char in enumerate(text):
                code = table.inverse.get(char)
                if code is None:
                    raise UnmappableCharacter(char, position)
                codes.append(code)
            self._logger.debug("Text successfully encrypted")
            return "".join(codes)

    def _decode(self, table: KeyTable, text: str) -> str:
        with self._logger.operation("decode"):
            self._logger.debug("Decrypting text...", length=len(text))
            chars = [
                table.lookup_code(text[start:start + CODE_WIDTH]) or ""
                for start in range(0, len(text), CODE_WIDTH)
            ]
            self._logger.debug("Text successfully decrypted")
            return "".join(chars)

    # ------------------------------------------------------------------ #
    #  Introspection
    # ------------------------------------------------------------------ #

    def describe(self) -> KeyTableSummary:
        """Summarise the active key table."""
        table = self._table
        shadowed = set(table.shadowed_keys)
        entries = [
            KeyTableEntry(
                key=key,
                code=format_key(key),
                character=char,
                shadowed=key in shadowed,
            )
            for key, char in table.forward.items()
        ]
        return KeyTableSummary(
            offset=table.offset,
            alphabet_size=len(table.alphabet),
            first_key=table.first_key,
            last_key=table.last_key,
            distinct_characters=len(table.inverse),
            shadowed_codes=[format_key(key) for key in sorted(shadowed)],
            entries=entries,
        )

    # ------------------------------------------------------------------ #
    #  Random base keys
    # ------------------------------------------------------------------ #

    @staticmethod
    def generate_random_base_key(length: int = DEFAULT_LENGTH) -> str:
        """See :func:`teacodec.keys.generator.generate_random_base_key`."""
        return generate_random_base_key(length)
