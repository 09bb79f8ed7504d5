"""
Domain models and value objects.

Contains fundamental value objects like CurvePoint, PublicKeyBuffer,
DigestOutput, AddressRecord.
"""

from src.core.domain.address_record import AddressRecord
from src.core.domain.constants import (
    ADDRESS_LENGTH_CHARS,
    ADDRESS_PATTERN,
    ADDRESS_PREFIX,
    ADDRESS_SIZE_BYTES,
    ANY_CASE_ADDRESS_PATTERN,
    COORDINATE_WIDTH_BYTES,
    DIGEST_SIZE_BYTES,
    PUBLIC_KEY_BUFFER_BYTES,
    UNCOMPRESSED_POINT_BYTES,
    UNCOMPRESSED_POINT_MARKER,
)
from src.core.domain.key_material import CurvePoint, DigestOutput, PublicKeyBuffer

__all__ = [
    # Constants
    "COORDINATE_WIDTH_BYTES",
    "PUBLIC_KEY_BUFFER_BYTES",
    "UNCOMPRESSED_POINT_MARKER",
    "UNCOMPRESSED_POINT_BYTES",
    "DIGEST_SIZE_BYTES",
    "ADDRESS_SIZE_BYTES",
    "ADDRESS_PREFIX",
    "ADDRESS_LENGTH_CHARS",
    "ADDRESS_PATTERN",
    "ANY_CASE_ADDRESS_PATTERN",
    # Key material
    "CurvePoint",
    "PublicKeyBuffer",
    "DigestOutput",
    # Records
    "AddressRecord",
]
