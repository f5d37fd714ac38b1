"""
TeaCodec Shared Module
======================

Configuration, structured logging, and console helpers shared by the
TeaCodec tool and its command-line interface.
"""

from shared.config import CodecConfig, GlobalConfig, TeaConfig

__all__ = ["CodecConfig", "GlobalConfig", "TeaConfig"]
