"""
TeaCodec -- Positional Substitution Codec
==========================================

Maps each character of a configurable ASCII alphabet to a three-digit
numeric code (its position plus an offset) and reverses the mapping.
This is a reversible obfuscation scheme, not encryption: it offers no
confidentiality against anyone who knows or can recover the alphabet.

Modules:
    - teacodec.keys: Key table builder and random base key generator
    - teacodec.core.engine: The TeaCodec facade
    - teacodec.core.models: Pydantic result models
    - teacodec.errors: Error hierarchy
    - teacodec.output: Console and report output
    - teacodec.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "teacodec"
