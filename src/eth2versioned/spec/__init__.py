from eth2versioned.spec.version import DataVersion

__all__ = ["DataVersion"]
