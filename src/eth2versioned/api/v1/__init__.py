from eth2versioned.api.v1 import deneb, electra
from eth2versioned.api.v1.block_contents import BlockContentsJSON, single_quote

__all__ = ["BlockContentsJSON", "deneb", "electra", "single_quote"]
