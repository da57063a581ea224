from eth2versioned.api.versioned_block_request import VersionedBlockRequest

__all__ = ["VersionedBlockRequest"]
