# src/eth2versioned/structured_logging.py
from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional

Json = Dict[str, Any]


def _now_ms() -> int:
    return int(time.time() * 1000)


def configure_structured_logging(level_name: Optional[str] = None) -> None:
    """Configure stdlib logging for JSONL output (stderr).

    - Level from the argument, else the codec config (ETH2V_LOG_LEVEL).
    - Safe to call multiple times.
    """
    if level_name is None:
        from eth2versioned.config import get_codec_config

        level_name = get_codec_config().log_level
    level = getattr(logging, str(level_name).strip().upper(), logging.INFO)

    root = logging.getLogger("eth2versioned")
    if getattr(root, "_eth2v_configured", False):  # type: ignore[attr-defined]
        root.setLevel(level)
        for h in root.handlers:
            h.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False
    setattr(root, "_eth2v_configured", True)  # type: ignore[attr-defined]


def log_event(logger: logging.Logger, event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a single JSONL log event."""
    if not logger.isEnabledFor(level):
        return
    payload: Json = {"ts_ms": _now_ms(), "event": str(event)}
    payload.update(fields)
    try:
        logger.log(level, json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    except (TypeError, ValueError):
        parts = [f"event={event}"] + [f"{k}={fields.get(k)!r}" for k in sorted(fields.keys())]
        logger.log(level, " ".join(parts))
