from __future__ import annotations


class VersionedDataError(RuntimeError):
    """Base for failures reading a fork-tagged value."""

    code = "versioned_data_error"


class UnsupportedVersion(VersionedDataError):
    code = "unsupported_version"

    def __init__(self, version: object) -> None:
        super().__init__(f"unsupported version: {version}")
        self.version = version


class DataMissing(VersionedDataError):
    code = "data_missing"

    def __init__(self, link: str) -> None:
        super().__init__(f"data missing: {link}")
        self.link = link


class CodecError(RuntimeError):
    """Encode/decode failure labelled with the hop that failed.

    stage is one of "failed to unmarshal YAML", "failed to marshal YAML",
    "failed to marshal JSON" or "failed to unmarshal JSON".
    """

    def __init__(self, stage: str, code: str, reason: str) -> None:
        super().__init__(f"{stage}: {reason}")
        self.stage = stage
        self.code = code
        self.reason = reason
