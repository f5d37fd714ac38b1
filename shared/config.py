"""
TeaCodec Configuration Management
==================================

Centralized configuration for the TeaCodec toolkit using Python
dataclasses and TOML-based persistence.

Configuration is kept separate from code: the codec alphabet, key offset
and logging behaviour can all be changed from a ``teacodec.toml`` file
without touching the library.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# Configuration file looked up in the working directory when no path is given
DEFAULT_CONFIG_NAME: str = "teacodec.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class CodecConfig:
    """Configuration for the substitution codec.

    ``alphabet`` and ``offset`` define the key table; ``None`` selects the
    codec defaults. ``offset + len(alphabet)`` must land in [100, 999]
    for the table to build.
    """

    alphabet: str | None = None
    offset: int | None = None
    random_key_length: int = 64


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destination."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class TeaConfig:
    """Master configuration aggregating codec and global settings.

    Usage:
        >>> config = TeaConfig.load()                  # ./teacodec.toml, if present
        >>> config = TeaConfig.load("custom.toml")     # from custom path
        >>> print(config.global_settings.log_level)
        INFO
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> TeaConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``teacodec.toml`` in the
        current working directory and returns defaults when it is absent.
        Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`TeaConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        if path is not None:
            config_path = Path(path)
        else:
            config_path = Path.cwd() / DEFAULT_CONFIG_NAME

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            codec=cls._build_section(CodecConfig, raw.get("codec", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

