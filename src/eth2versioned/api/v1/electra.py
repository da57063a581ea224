from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Type

from eth2versioned.api.v1.block_contents import BlockContentsBase
from eth2versioned.spec import electra
from eth2versioned.spec.fields import Container
from eth2versioned.spec.version import DataVersion


@dataclass(frozen=True)
class BlockContents(BlockContentsBase):
    """Electra block with the blobs and KZG proofs it commits to."""

    FORK: ClassVar[DataVersion] = DataVersion.ELECTRA
    BLOCK_TYPE: ClassVar[Type[Container]] = electra.BeaconBlock

    block: Optional[electra.BeaconBlock] = None
