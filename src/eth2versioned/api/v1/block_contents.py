from __future__ import annotations

"""Block contents codec shared by the Deneb and Electra variants.

Block contents travel in two encodings:

  - JSON (compact): {"block": {...}, "kzg_proofs": ["0x.."], "blobs": ["0x.."]}
  - YAML (verbose): the same object in flow style with single-quoted scalars

BlockContentsJSON is the only field mapping. YAML output is produced by dumping
that object; YAML input is parsed into it, re-serialized as JSON and handed to
unmarshal_json, so the two encodings cannot drift apart.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from eth2versioned.config import CodecConfig, get_codec_config
from eth2versioned.errors import CodecError
from eth2versioned.spec.deneb import BYTES_PER_BLOB, KZG_PROOF_LENGTH, MAX_BLOB_COMMITMENTS_PER_BLOCK
from eth2versioned.spec.fields import Bytes, Container, SpecDecodeError, SpecEncodeError, dumps_compact
from eth2versioned.spec.version import DataVersion
from eth2versioned.structured_logging import log_event

_log = logging.getLogger("eth2versioned.codec")

STAGE_UNMARSHAL_YAML = "failed to unmarshal YAML"
STAGE_MARSHAL_YAML = "failed to marshal YAML"
STAGE_MARSHAL_JSON = "failed to marshal JSON"
STAGE_UNMARSHAL_JSON = "failed to unmarshal JSON"

# Never fold long scalars; a folded double-quoted line would not survive
# the switch to single quotes.
_YAML_WIDTH = 1 << 31

_PROOF = Bytes(KZG_PROOF_LENGTH)
_BLOB = Bytes(BYTES_PER_BLOB)


class BlockContentsJSON(BaseModel):
    """Intermediate object shared by the JSON and YAML encodings."""

    model_config = ConfigDict(extra="forbid")

    block: Dict[str, Any]
    kzg_proofs: List[str]
    blobs: List[str]


def single_quote(text: str) -> str:
    """Replace every double quote with a single quote."""
    return text.replace('"', "'")


def _first_error(e: ValidationError) -> str:
    errs = e.errors()
    if not errs:
        return str(e)
    loc = ".".join(str(p) for p in errs[0].get("loc", ()))
    return f"{loc}: {errs[0].get('msg', 'invalid')}" if loc else str(errs[0].get("msg", "invalid"))


@dataclass(frozen=True)
class BlockContentsBase:
    FORK: ClassVar[DataVersion] = DataVersion.UNKNOWN
    BLOCK_TYPE: ClassVar[Type[Container]] = Container

    block: Optional[Container] = None
    kzg_proofs: Tuple[bytes, ...] = ()
    blobs: Tuple[bytes, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "kzg_proofs", tuple(self.kzg_proofs))
        object.__setattr__(self, "blobs", tuple(self.blobs))

    # -----------------------------
    # Encoding
    # -----------------------------

    def _intermediate(self, stage: str) -> BlockContentsJSON:
        if self.block is None:
            raise CodecError(stage, "missing_block", "block missing")
        if not isinstance(self.block, self.BLOCK_TYPE):
            raise CodecError(
                stage,
                "invalid_block",
                f"expected {self.FORK} {self.BLOCK_TYPE.__name__}, got {type(self.block).__name__}",
            )
        try:
            return BlockContentsJSON(
                block=self.block.to_json(),
                kzg_proofs=[_PROOF.encode(p, f"kzg_proofs[{i}]") for i, p in enumerate(self.kzg_proofs)],
                blobs=[_BLOB.encode(b, f"blobs[{i}]") for i, b in enumerate(self.blobs)],
            )
        except SpecEncodeError as e:
            raise CodecError(stage, e.code, str(e)) from e

    def marshal_json(self) -> bytes:
        obj = self._intermediate(STAGE_MARSHAL_JSON).model_dump()
        return dumps_compact(obj).encode("utf-8")

    def marshal_yaml(self) -> bytes:
        obj = self._intermediate(STAGE_MARSHAL_YAML).model_dump()
        text = yaml.safe_dump(
            obj,
            default_flow_style=True,
            default_style='"',
            sort_keys=False,
            allow_unicode=True,
            width=_YAML_WIDTH,
        )
        return single_quote(text).encode("utf-8")

    def __str__(self) -> str:
        try:
            return self.marshal_json().decode("utf-8")
        except CodecError as e:
            return f"ERR: {e}"

    # -----------------------------
    # Decoding
    # -----------------------------

    @classmethod
    def _fail(cls, stage: str, code: str, reason: str) -> CodecError:
        log_event(_log, "block_contents_decode_failed", level=logging.DEBUG, fork=str(cls.FORK), stage=stage, code=code)
        return CodecError(stage, code, reason)

    @classmethod
    def _read_input(cls, data: Union[bytes, bytearray, str], stage: str, cfg: CodecConfig) -> str:
        if isinstance(data, str):
            raw = data.encode("utf-8")
        elif isinstance(data, (bytes, bytearray)):
            raw = bytes(data)
        else:
            raise cls._fail(stage, "invalid_input", f"expected bytes or str, got {type(data).__name__}")

        if len(raw) > int(cfg.max_input_bytes):
            raise cls._fail(stage, "input_too_large", f"{len(raw)} bytes exceeds limit {cfg.max_input_bytes}")
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise cls._fail(stage, "invalid_utf8", str(e)) from e

    @classmethod
    def _validate(cls, raw: Any, stage: str) -> BlockContentsJSON:
        try:
            return BlockContentsJSON.model_validate(raw)
        except ValidationError as e:
            raise cls._fail(stage, "invalid_shape", _first_error(e)) from e

    @classmethod
    def _from_intermediate(cls, obj: BlockContentsJSON, cfg: CodecConfig) -> "BlockContentsBase":
        stage = STAGE_UNMARSHAL_JSON
        if len(obj.kzg_proofs) > MAX_BLOB_COMMITMENTS_PER_BLOCK:
            raise cls._fail(stage, "too_many_proofs", f"{len(obj.kzg_proofs)} proofs")
        if len(obj.blobs) > MAX_BLOB_COMMITMENTS_PER_BLOCK:
            raise cls._fail(stage, "too_many_blobs", f"{len(obj.blobs)} blobs")

        try:
            block = cls.BLOCK_TYPE.from_json(obj.block, strict=cfg.strict_json)
            proofs = tuple(_PROOF.decode(p, f"kzg_proofs[{i}]", cfg.strict_json) for i, p in enumerate(obj.kzg_proofs))
            blobs = tuple(_BLOB.decode(b, f"blobs[{i}]", cfg.strict_json) for i, b in enumerate(obj.blobs))
        except SpecDecodeError as e:
            raise cls._fail(stage, e.code, str(e)) from e

        return cls(block=block, kzg_proofs=proofs, blobs=blobs)

    @classmethod
    def unmarshal_json(
        cls, data: Union[bytes, bytearray, str], *, cfg: Optional[CodecConfig] = None
    ) -> "BlockContentsBase":
        cfg = cfg or get_codec_config()
        text = cls._read_input(data, STAGE_UNMARSHAL_JSON, cfg)
        try:
            raw = json.loads(text)
        except ValueError as e:
            # JSONDecodeError, or an integer literal past the int conversion limit.
            raise cls._fail(STAGE_UNMARSHAL_JSON, "invalid_json", str(e)) from e
        return cls._from_intermediate(cls._validate(raw, STAGE_UNMARSHAL_JSON), cfg)

    @classmethod
    def unmarshal_yaml(
        cls, data: Union[bytes, bytearray, str], *, cfg: Optional[CodecConfig] = None
    ) -> "BlockContentsBase":
        cfg = cfg or get_codec_config()
        text = cls._read_input(data, STAGE_UNMARSHAL_YAML, cfg)
        try:
            raw = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError) as e:
            raise cls._fail(STAGE_UNMARSHAL_YAML, "invalid_yaml", str(e)) from e

        # Decode through the JSON path to share its field mapping.
        obj = cls._validate(raw, STAGE_UNMARSHAL_YAML)
        try:
            marshaled = dumps_compact(obj.model_dump())
        except (TypeError, ValueError) as e:
            raise cls._fail(STAGE_MARSHAL_JSON, "encode_failed", str(e)) from e

        return cls.unmarshal_json(marshaled, cfg=cfg)
