"""
AddressRecord — Результат деривации адреса для именованного ключа

Immutable Pydantic модель. Полная совместимость с JSON Schema
(src/core/contracts/schema/address_record.json).
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from .constants import ADDRESS_PATTERN, ANY_CASE_ADDRESS_PATTERN


class AddressRecord(BaseModel):
    """
    Адрес, выведенный из публичного ключа в KMS.

    Хранит только публичные данные: имя ключа, адрес в двух формах
    и публичный ключ (X || Y) в hex.
    """

    key_name: str = Field(..., min_length=1, description="Имя ключа в хранилище")
    address: str = Field(..., pattern=ADDRESS_PATTERN, description="Адрес (lowercase)")
    checksum_address: str = Field(
        ..., pattern=ANY_CASE_ADDRESS_PATTERN, description="Адрес в EIP-55 форме"
    )
    public_key_hex: str = Field(
        ..., pattern=r"^[0-9a-f]+$", description="X || Y в lowercase hex"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_same_address(self) -> "AddressRecord":
        """Checksum-форма должна совпадать с lowercase адресом без учёта регистра."""
        if self.checksum_address.lower() != self.address:
            raise ValueError(
                f"checksum_address {self.checksum_address} does not match address {self.address}"
            )
        return self

    def to_contract_dict(self) -> Dict[str, Any]:
        """Сериализация в dict для валидации контракта address_record."""
        return self.model_dump(mode="json")
