"""Binding - argument marshalling around a ProtocolEngine."""
from __future__ import annotations

import logging
from typing import Any

from bounce_binding.engine import ProtocolEngine, Signer

logger = logging.getLogger(__name__)

PRIVATE_KEY_SIZE = 32
_U64_LIMIT = 2**64


class BindingError(Exception):
    """Raised when a call cannot be forwarded (missing keypair or identity)."""


def hex_to_bytes(value: str) -> bytes:
    return bytes.fromhex(value)


def bytes_to_hex(value: bytes) -> str:
    return value.hex()


def to_u64(value: int | str) -> int:
    """Widen ``value`` to an unsigned 64-bit integer."""
    number = int(value)
    if not 0 <= number < _U64_LIMIT:
        raise ValueError(f"{value!r} does not fit in an unsigned 64-bit integer")
    return number


class Binding:
    """Forwards calls to the engine. Engine failures propagate unchanged."""

    def __init__(self, engine: ProtocolEngine, identity_hex: str | None = None) -> None:
        self._engine = engine
        self._signer: Signer | None = None
        self._identity = hex_to_bytes(identity_hex) if identity_hex else None

    @property
    def identity(self) -> bytes | None:
        return self._identity

    # --- Keys ---

    def create_keypair(self, private_key: bytes | None = None) -> Signer:
        if private_key is None:
            self._signer = self._engine.new_signer()
        else:
            if not isinstance(private_key, bytes) or len(private_key) != PRIVATE_KEY_SIZE:
                raise BindingError(
                    f"private key must be exactly {PRIVATE_KEY_SIZE} bytes"
                )
            self._signer = self._engine.signer_from_bytes(private_key)
        return self._signer

    def _require_signer(self) -> Signer:
        if self._signer is None:
            raise BindingError("keypair not initialized")
        return self._signer

    @property
    def public_key(self) -> bytes:
        return self._require_signer().public_key

    @property
    def public_key_hex(self) -> str:
        return self._require_signer().public_key_hex

    @property
    def private_key_hex(self) -> str:
        return self._require_signer().private_key_hex

    # --- Transactions ---

    def generate_transaction(self, nonce: int) -> bytes:
        return self._engine.generate_tx(self._require_signer(), to_u64(nonce)).encode()

    def match_transaction(self, nonce: int) -> bytes:
        return self._engine.match_tx(self._require_signer(), to_u64(nonce)).encode()

    def move_transaction(
        self, nonce: int, master_public: bytes, expiry: int, move_index: int
    ) -> bytes:
        tx = self._engine.move_tx(
            self._require_signer(),
            to_u64(nonce),
            master_public,
            to_u64(expiry),
            move_index,
        )
        return tx.encode()

    def settle_transaction(self, nonce: int, seed: bytes) -> bytes:
        return self._engine.settle_tx(self._require_signer(), to_u64(nonce), seed).encode()

    # --- Keys, filters, queries ---

    def encode_account_key(self, public_key: bytes) -> bytes:
        return self._engine.encode_account_key(public_key)

    def encode_battle_key(self, digest: bytes) -> bytes:
        return self._engine.encode_battle_key(digest)

    def encode_leaderboard_key(self) -> bytes:
        return self._engine.encode_leaderboard_key()

    def encode_updates_filter_all(self) -> bytes:
        return self._engine.encode_updates_filter_all()

    def encode_updates_filter_account(self, public_key: bytes) -> bytes:
        return self._engine.encode_updates_filter_account(public_key)

    def hash_key(self, key: bytes) -> bytes:
        return self._engine.hash_key(key)

    def encode_query(self, kind: str, index: int | None = None) -> bytes:
        if kind == "latest":
            return self._engine.encode_query_latest()
        if kind == "index" and index is not None:
            return self._engine.encode_query_index(to_u64(index))
        raise BindingError(f"invalid query type {kind!r}")

    # --- Verified decodes ---

    def _require_identity(self, purpose: str) -> bytes:
        if self._identity is None:
            raise BindingError(f"no identity configured for {purpose} verification")
        return self._identity

    def decode_lookup(self, data: bytes) -> Any:
        identity = self._require_identity("events")
        try:
            return self._engine.decode_lookup(data, identity)
        except Exception as exc:
            logger.warning(f"Failed to decode lookup: {exc}")
            raise

    def decode_seed(self, data: bytes) -> Any:
        return self._engine.decode_seed(data, self._require_identity("seed"))

    def decode_update(self, data: bytes) -> Any:
        return self._engine.decode_update(data, self._require_identity("update"))

    # --- Submissions ---

    def wrap_transaction_submission(self, data: bytes) -> bytes:
        return self._engine.wrap_transaction_submission(data)

    def wrap_summary_submission(self, data: bytes) -> bytes:
        return self._engine.wrap_summary_submission(data)

    def wrap_seed_submission(self, data: bytes) -> bytes:
        return self._engine.wrap_seed_submission(data)

    # --- Seeds, blocks, creatures ---

    def get_identity(self, seed: bytes) -> bytes:
        return self._engine.get_identity(seed)

    def encode_seed(self, seed: bytes, view: int) -> bytes:
        return self._engine.encode_seed(seed, to_u64(view))

    def execute_block(self, network_secret: bytes, view: int, tx_bytes: bytes) -> bytes:
        return self._engine.execute_block(network_secret, to_u64(view), tx_bytes)

    def generate_creature_from_traits(self, traits: bytes) -> Any:
        return self._engine.generate_creature_from_traits(traits)
