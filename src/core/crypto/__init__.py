"""
Crypto — деривация адреса из публичного ключа secp256k1.

Чистые функции без I/O: валидация координат, Keccak-256, извлечение адреса,
EIP-55 и адаптеры форматов ключей (SEC1, DER/PEM, JWK).
"""

from src.core.crypto.address_deriver import (
    AddressDeriver,
    DeriverConfig,
    derive,
    derive_address,
    digest,
    to_public_key_buffer,
    validate_point,
)
from src.core.crypto.checksum import is_address, is_checksum_address, to_checksum_address
from src.core.crypto.encodings import (
    point_from_der,
    point_from_jwk,
    point_from_pem,
    point_from_public_key,
    split_uncompressed_point,
)
from src.core.crypto.errors import (
    AddressDerivationError,
    InvalidAddress,
    InvalidDigestLength,
    InvalidPublicKey,
)
from src.core.crypto.hashing import HashFunction, keccak256

__all__ = [
    # Deriver
    "AddressDeriver",
    "DeriverConfig",
    "validate_point",
    "to_public_key_buffer",
    "digest",
    "derive_address",
    "derive",
    # Hashing
    "HashFunction",
    "keccak256",
    # EIP-55
    "is_address",
    "is_checksum_address",
    "to_checksum_address",
    # Encodings
    "split_uncompressed_point",
    "point_from_public_key",
    "point_from_der",
    "point_from_pem",
    "point_from_jwk",
    # Errors
    "AddressDerivationError",
    "InvalidPublicKey",
    "InvalidDigestLength",
    "InvalidAddress",
]
