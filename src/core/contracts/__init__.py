"""
Contract Validation Module

Модуль для валидации JSON контрактов (JWK ключи, записи адресов).
"""

from .validators import (
    AddressRecordValidator,
    ContractValidator,
    EcPublicJwkValidator,
    SchemaLoader,
    ValidationError,
    validate_address_record,
    validate_ec_public_jwk,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EcPublicJwkValidator",
    "AddressRecordValidator",
    "ValidationError",
    # Functions
    "validate_ec_public_jwk",
    "validate_address_record",
]
