from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from eth2versioned.spec import altair, bellatrix, capella, deneb, electra, phase0
from eth2versioned.spec.roots import compute_root
from eth2versioned.spec.version import DataVersion
from eth2versioned.spec.versioned import ForkTagged, VersionedAttestation, VersionedAttesterSlashing, fork_tagged


@fork_tagged
@dataclass(frozen=True, slots=True)
class VersionedBlockRequest(ForkTagged):
    """A signed beacon block request for one of the supported forks.

    Every accessor fails with UnsupportedVersion for an unknown tag and with
    DataMissing when the payload, or any record on the path to the requested
    field, is absent. Nothing is cached; each call reads the payload afresh.
    """

    version: DataVersion = DataVersion.UNKNOWN
    bellatrix: Optional[bellatrix.SignedBeaconBlock] = None
    capella: Optional[capella.SignedBeaconBlock] = None
    deneb: Optional[deneb.SignedBeaconBlock] = None
    electra: Optional[electra.SignedBeaconBlock] = None

    def slot(self) -> int:
        return self._walk("message").slot

    def proposer_index(self) -> int:
        return self._walk("message").proposer_index

    def execution_block_hash(self) -> bytes:
        return self._walk("message", "body", "execution_payload").block_hash

    def attestations(self) -> List[VersionedAttestation]:
        body = self._walk("message", "body")
        return [VersionedAttestation.wrap(self.version, att) for att in body.attestations]

    def root(self) -> bytes:
        return compute_root(self._walk("message"))

    def body_root(self) -> bytes:
        return compute_root(self._walk("message", "body"))

    def parent_root(self) -> bytes:
        return self._walk("message").parent_root

    def state_root(self) -> bytes:
        return self._walk("message").state_root

    def attester_slashings(self) -> List[VersionedAttesterSlashing]:
        body = self._walk("message", "body")
        return [VersionedAttesterSlashing.wrap(self.version, s) for s in body.attester_slashings]

    def proposer_slashings(self) -> List[phase0.ProposerSlashing]:
        return list(self._walk("message", "body").proposer_slashings)

    def sync_aggregate(self) -> Optional[altair.SyncAggregate]:
        # Only the body is required; an absent aggregate is returned as None.
        return self._walk("message", "body").sync_aggregate
