"""bounce-binding - Marshalling wrapper for an external protocol engine."""
from __future__ import annotations

from bounce_binding.engine import ProtocolEngine, Signer, Transaction
from bounce_binding.wrapper import (
    Binding,
    BindingError,
    bytes_to_hex,
    hex_to_bytes,
    to_u64,
)

__all__ = [
    "Binding",
    "BindingError",
    "ProtocolEngine",
    "Signer",
    "Transaction",
    "bytes_to_hex",
    "hex_to_bytes",
    "to_u64",
]
