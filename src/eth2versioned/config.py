# src/eth2versioned/config.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from eth2versioned.env import load_dotenv_if_present

Json = Dict[str, Any]


def _as_int(v: Any, default: int) -> int:
    try:
        return int(v)
    except Exception:
        return int(default)


def _as_str(v: Any, default: str) -> str:
    if v is None:
        return str(default)
    s = str(v)
    return s if s.strip() else str(default)


def _as_bool(v: Any, default: bool) -> bool:
    if v is None:
        return bool(default)
    if isinstance(v, bool):
        return v
    s = str(v).strip().lower()
    if s in {"1", "true", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "no", "n", "off"}:
        return False
    return bool(default)


@dataclass(frozen=True)
class CodecConfig:
    log_level: str

    # Reject keys a record type does not declare when decoding JSON/YAML.
    strict_json: bool

    # Upper bound on raw JSON/YAML input accepted by the block contents codec.
    max_input_bytes: int


_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Nine blobs of 131072 bytes hex-encoded, plus headroom for the block itself.
_DEFAULT_MAX_INPUT_BYTES = 8 * 1024 * 1024


def validate_codec_config(cfg: CodecConfig) -> None:
    """Fail-fast validation for codec config."""

    level = str(cfg.log_level or "").strip().upper()
    if level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_ALLOWED_LOG_LEVELS)}; got: {cfg.log_level!r}")

    if not isinstance(cfg.strict_json, bool):
        raise ValueError(f"strict_json must be a bool; got: {cfg.strict_json!r}")

    if int(cfg.max_input_bytes) <= 0:
        raise ValueError(f"max_input_bytes must be > 0; got: {cfg.max_input_bytes}")


def default_codec_config() -> CodecConfig:
    return CodecConfig(
        log_level="INFO",
        strict_json=False,
        max_input_bytes=_DEFAULT_MAX_INPUT_BYTES,
    )


def read_codec_config_file(path: str) -> CodecConfig:
    p = Path(path)
    raw = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("codec config must be a JSON object")

    d = default_codec_config()

    cfg = CodecConfig(
        log_level=_as_str(raw.get("log_level"), d.log_level).strip().upper(),
        strict_json=_as_bool(raw.get("strict_json"), d.strict_json),
        max_input_bytes=_as_int(raw.get("max_input_bytes"), d.max_input_bytes),
    )

    validate_codec_config(cfg)
    return cfg


def _config_from_env() -> CodecConfig:
    d = default_codec_config()
    return CodecConfig(
        log_level=_as_str(os.environ.get("ETH2V_LOG_LEVEL"), d.log_level).strip().upper(),
        strict_json=_as_bool(os.environ.get("ETH2V_STRICT_JSON"), d.strict_json),
        max_input_bytes=_as_int(os.environ.get("ETH2V_MAX_INPUT_BYTES"), d.max_input_bytes),
    )


def load_codec_config(*, config_path: Optional[str] = None) -> CodecConfig:
    load_dotenv_if_present()

    p = config_path or os.environ.get("ETH2V_CONFIG_PATH")
    if p:
        return read_codec_config_file(p)

    cfg = _config_from_env()
    validate_codec_config(cfg)
    return cfg


_CACHED: Optional[CodecConfig] = None


def get_codec_config() -> CodecConfig:
    """Process-wide config, loaded on first use."""
    global _CACHED
    if _CACHED is None:
        _CACHED = load_codec_config()
    return _CACHED


def reset_codec_config_cache() -> None:
    global _CACHED
    _CACHED = None
