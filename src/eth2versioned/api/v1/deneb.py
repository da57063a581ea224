from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Type

from eth2versioned.api.v1.block_contents import BlockContentsBase
from eth2versioned.spec import deneb
from eth2versioned.spec.fields import Container
from eth2versioned.spec.version import DataVersion


@dataclass(frozen=True)
class BlockContents(BlockContentsBase):
    """Deneb block with the blobs and KZG proofs it commits to."""

    FORK: ClassVar[DataVersion] = DataVersion.DENEB
    BLOCK_TYPE: ClassVar[Type[Container]] = deneb.BeaconBlock

    block: Optional[deneb.BeaconBlock] = None
