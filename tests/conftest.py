from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure local "src/" takes precedence over any globally-installed "eth2versioned" package.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def _isolated_codec_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    from eth2versioned.config import reset_codec_config_cache
    from eth2versioned.env import reset_dotenv_state

    for name in ("ETH2V_CONFIG_PATH", "ETH2V_LOG_LEVEL", "ETH2V_STRICT_JSON", "ETH2V_MAX_INPUT_BYTES"):
        monkeypatch.delenv(name, raising=False)
    # Point the dotenv loader at a file that does not exist.
    monkeypatch.setenv("ETH2V_DOTENV_PATH", str(tmp_path / "absent.env"))
    reset_codec_config_cache()
    reset_dotenv_state()
    yield
    reset_codec_config_cache()
    reset_dotenv_state()
