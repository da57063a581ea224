from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from eth2versioned.spec.fields import Bytes, Container, ListOf, Nested, Uint, VectorOf, spec_field

ROOT_LENGTH = 32
HASH32_LENGTH = 32
PUBKEY_LENGTH = 48
SIGNATURE_LENGTH = 96

# Mainnet preset.
MAX_VALIDATORS_PER_COMMITTEE = 2048
MAX_PROPOSER_SLASHINGS = 16
MAX_ATTESTER_SLASHINGS = 2
MAX_ATTESTATIONS = 128
MAX_DEPOSITS = 16
MAX_VOLUNTARY_EXITS = 16
DEPOSIT_CONTRACT_TREE_DEPTH = 32


@dataclass(frozen=True, slots=True)
class Checkpoint(Container):
    epoch: int = spec_field(Uint())
    root: bytes = spec_field(Bytes(ROOT_LENGTH))


@dataclass(frozen=True, slots=True)
class AttestationData(Container):
    slot: int = spec_field(Uint())
    index: int = spec_field(Uint())
    beacon_block_root: bytes = spec_field(Bytes(ROOT_LENGTH))
    source: Optional[Checkpoint] = spec_field(Nested(Checkpoint))
    target: Optional[Checkpoint] = spec_field(Nested(Checkpoint))


@dataclass(frozen=True, slots=True)
class Attestation(Container):
    # SSZ bitlist, raw bytes including the length bit.
    aggregation_bits: bytes = spec_field(Bytes(max_length=MAX_VALIDATORS_PER_COMMITTEE // 8 + 1))
    data: Optional[AttestationData] = spec_field(Nested(AttestationData))
    signature: bytes = spec_field(Bytes(SIGNATURE_LENGTH))


@dataclass(frozen=True, slots=True)
class IndexedAttestation(Container):
    attesting_indices: Tuple[int, ...] = spec_field(ListOf(Uint(), MAX_VALIDATORS_PER_COMMITTEE))
    data: Optional[AttestationData] = spec_field(Nested(AttestationData))
    signature: bytes = spec_field(Bytes(SIGNATURE_LENGTH))


@dataclass(frozen=True, slots=True)
class AttesterSlashing(Container):
    attestation_1: Optional[IndexedAttestation] = spec_field(Nested(IndexedAttestation))
    attestation_2: Optional[IndexedAttestation] = spec_field(Nested(IndexedAttestation))


@dataclass(frozen=True, slots=True)
class BeaconBlockHeader(Container):
    slot: int = spec_field(Uint())
    proposer_index: int = spec_field(Uint())
    parent_root: bytes = spec_field(Bytes(ROOT_LENGTH))
    state_root: bytes = spec_field(Bytes(ROOT_LENGTH))
    body_root: bytes = spec_field(Bytes(ROOT_LENGTH))


@dataclass(frozen=True, slots=True)
class SignedBeaconBlockHeader(Container):
    message: Optional[BeaconBlockHeader] = spec_field(Nested(BeaconBlockHeader))
    signature: bytes = spec_field(Bytes(SIGNATURE_LENGTH))


@dataclass(frozen=True, slots=True)
class ProposerSlashing(Container):
    signed_header_1: Optional[SignedBeaconBlockHeader] = spec_field(Nested(SignedBeaconBlockHeader))
    signed_header_2: Optional[SignedBeaconBlockHeader] = spec_field(Nested(SignedBeaconBlockHeader))


@dataclass(frozen=True, slots=True)
class Eth1Data(Container):
    deposit_root: bytes = spec_field(Bytes(ROOT_LENGTH))
    deposit_count: int = spec_field(Uint())
    block_hash: bytes = spec_field(Bytes(HASH32_LENGTH))


@dataclass(frozen=True, slots=True)
class DepositData(Container):
    pubkey: bytes = spec_field(Bytes(PUBKEY_LENGTH))
    withdrawal_credentials: bytes = spec_field(Bytes(32))
    amount: int = spec_field(Uint())
    signature: bytes = spec_field(Bytes(SIGNATURE_LENGTH))


@dataclass(frozen=True, slots=True)
class Deposit(Container):
    proof: Tuple[bytes, ...] = spec_field(VectorOf(Bytes(32), DEPOSIT_CONTRACT_TREE_DEPTH + 1))
    data: Optional[DepositData] = spec_field(Nested(DepositData))


@dataclass(frozen=True, slots=True)
class VoluntaryExit(Container):
    epoch: int = spec_field(Uint())
    validator_index: int = spec_field(Uint())


@dataclass(frozen=True, slots=True)
class SignedVoluntaryExit(Container):
    message: Optional[VoluntaryExit] = spec_field(Nested(VoluntaryExit))
    signature: bytes = spec_field(Bytes(SIGNATURE_LENGTH))
