"""Protocol of the external compiled engine the binding forwards to."""
from __future__ import annotations

from typing import Any, Protocol


class Signer(Protocol):
    public_key: bytes
    public_key_hex: str
    private_key_hex: str


class Transaction(Protocol):
    def encode(self) -> bytes: ...


class ProtocolEngine(Protocol):
    """Opaque encode/decode surface. Failures surface as exceptions."""

    def new_signer(self) -> Signer: ...

    def signer_from_bytes(self, private_key: bytes) -> Signer: ...

    def generate_tx(self, signer: Signer, nonce: int) -> Transaction: ...

    def match_tx(self, signer: Signer, nonce: int) -> Transaction: ...

    def move_tx(
        self,
        signer: Signer,
        nonce: int,
        master_public: bytes,
        expiry: int,
        move_index: int,
    ) -> Transaction: ...

    def settle_tx(self, signer: Signer, nonce: int, seed: bytes) -> Transaction: ...

    def encode_account_key(self, public_key: bytes) -> bytes: ...

    def encode_battle_key(self, digest: bytes) -> bytes: ...

    def encode_leaderboard_key(self) -> bytes: ...

    def encode_updates_filter_all(self) -> bytes: ...

    def encode_updates_filter_account(self, public_key: bytes) -> bytes: ...

    def hash_key(self, key: bytes) -> bytes: ...

    def encode_query_latest(self) -> bytes: ...

    def encode_query_index(self, index: int) -> bytes: ...

    def decode_lookup(self, data: bytes, identity: bytes) -> Any: ...

    def decode_seed(self, data: bytes, identity: bytes) -> Any: ...

    def decode_update(self, data: bytes, identity: bytes) -> Any: ...

    def wrap_transaction_submission(self, data: bytes) -> bytes: ...

    def wrap_summary_submission(self, data: bytes) -> bytes: ...

    def wrap_seed_submission(self, data: bytes) -> bytes: ...

    def get_identity(self, seed: bytes) -> bytes: ...

    def encode_seed(self, seed: bytes, view: int) -> bytes: ...

    def execute_block(self, network_secret: bytes, view: int, tx_bytes: bytes) -> bytes: ...

    def generate_creature_from_traits(self, traits: bytes) -> Any: ...
