"""
peekelf Configuration Management
=================================

Centralized configuration for the peekelf inspector using Python
dataclasses and TOML-based persistence.

Configuration is kept separate from code: every tunable lives in a
dataclass with a safe default, and an optional ``peekelf.toml`` file
overrides individual keys.

Example ``peekelf.toml``::

    [global]
    log_level = "DEBUG"
    log_file = "peekelf.log"
    log_json = true

    [peekelf]
    max_file_size = 1048576
    strict_entry_size = false

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "peekelf.toml"


# ========================== Tool-Specific Config ===========================


@dataclass(frozen=False, slots=True)
class InspectorConfig:
    """Configuration for the ELF32 header inspector.

    Controls the input size cap, the program-header entry-size check,
    and layout of the rendered output.
    """

    max_file_size: int = 67_108_864  # 64 MiB
    strict_entry_size: bool = True
    type_column_gap: int = 6
    report_indent: int = 2


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PeekConfig:
    """Master configuration aggregating global and inspector settings.

    Usage:
        >>> config = PeekConfig.load()                   # from default path
        >>> config = PeekConfig.load("custom.toml")      # from custom path
        >>> config.inspector.strict_entry_size
        True
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    inspector: InspectorConfig = field(default_factory=InspectorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PeekConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``peekelf.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PeekConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

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
            inspector=cls._build_section(InspectorConfig, raw.get("peekelf", {})),
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


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> PeekConfig:
    """Module-level convenience wrapper around :meth:`PeekConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = PeekConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
