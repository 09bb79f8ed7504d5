"""
Тесты для доменных моделей: CurvePoint, PublicKeyBuffer, DigestOutput, AddressRecord

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Сериализацию JSON
4. Граничные случаи и невалидные данные
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    ADDRESS_LENGTH_CHARS,
    ADDRESS_SIZE_BYTES,
    COORDINATE_WIDTH_BYTES,
    DIGEST_SIZE_BYTES,
    PUBLIC_KEY_BUFFER_BYTES,
    UNCOMPRESSED_POINT_BYTES,
    UNCOMPRESSED_POINT_MARKER,
    AddressRecord,
    CurvePoint,
    DigestOutput,
    PublicKeyBuffer,
)
from tests.vectors import G_ADDRESS, G_CHECKSUM_ADDRESS, G_X, G_Y


# =============================================================================
# CONSTANTS
# =============================================================================


class TestConstants:
    """Согласованность констант адресной схемы"""

    def test_sizes(self) -> None:
        assert COORDINATE_WIDTH_BYTES == 32
        assert PUBLIC_KEY_BUFFER_BYTES == 64
        assert UNCOMPRESSED_POINT_BYTES == 65
        assert UNCOMPRESSED_POINT_MARKER == 0x04
        assert DIGEST_SIZE_BYTES == 32
        assert ADDRESS_SIZE_BYTES == 20
        assert ADDRESS_LENGTH_CHARS == 42


# =============================================================================
# CURVE POINT
# =============================================================================


class TestCurvePoint:
    """Тесты для модели CurvePoint"""

    def test_valid_point(self) -> None:
        point = CurvePoint(x=G_X, y=G_Y)
        assert point.width == 32
        assert point.to_hex() == (G_X + G_Y).hex()

    def test_empty_coordinate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CurvePoint(x=b"", y=G_Y)

    def test_unequal_widths_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Coordinate widths differ"):
            CurvePoint(x=G_X[:31], y=G_Y)

    def test_immutable(self) -> None:
        point = CurvePoint(x=G_X, y=G_Y)
        with pytest.raises(ValidationError):
            point.x = G_Y  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert CurvePoint(x=G_X, y=G_Y) == CurvePoint(x=bytes(G_X), y=bytes(G_Y))


class TestPublicKeyBufferModel:
    """Тесты для модели PublicKeyBuffer"""

    def test_valid_buffer(self) -> None:
        buffer = PublicKeyBuffer(data=G_X + G_Y)
        assert len(buffer) == PUBLIC_KEY_BUFFER_BYTES

    def test_odd_length_rejected(self) -> None:
        with pytest.raises(ValidationError, match="is not even"):
            PublicKeyBuffer(data=G_X + G_Y[:31])

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PublicKeyBuffer(data=b"")


class TestDigestOutputModel:
    """Тесты для модели DigestOutput"""

    def test_any_length_accepted(self) -> None:
        """Длина проверяется в derive_address, не в модели"""
        assert len(DigestOutput(data=b"")) == 0
        assert len(DigestOutput(data=bytes(33))) == 33

    def test_immutable(self) -> None:
        out = DigestOutput(data=bytes(32))
        with pytest.raises(ValidationError):
            out.data = bytes(31)  # type: ignore[misc]


# =============================================================================
# ADDRESS RECORD
# =============================================================================


class TestAddressRecord:
    """Тесты для модели AddressRecord"""

    @pytest.fixture
    def valid_record(self) -> AddressRecord:
        return AddressRecord(
            key_name="signer",
            address=G_ADDRESS,
            checksum_address=G_CHECKSUM_ADDRESS,
            public_key_hex=(G_X + G_Y).hex(),
        )

    def test_valid_record(self, valid_record) -> None:
        assert valid_record.address == G_ADDRESS
        assert valid_record.checksum_address == G_CHECKSUM_ADDRESS

    def test_uppercase_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AddressRecord(
                key_name="signer",
                address=G_CHECKSUM_ADDRESS,
                checksum_address=G_CHECKSUM_ADDRESS,
                public_key_hex=(G_X + G_Y).hex(),
            )

    def test_mismatched_checksum_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not match address"):
            AddressRecord(
                key_name="signer",
                address=G_ADDRESS,
                checksum_address="0x" + "0" * 40,
                public_key_hex=(G_X + G_Y).hex(),
            )

    def test_empty_key_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AddressRecord(
                key_name="",
                address=G_ADDRESS,
                checksum_address=G_CHECKSUM_ADDRESS,
                public_key_hex=(G_X + G_Y).hex(),
            )

    def test_short_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AddressRecord(
                key_name="signer",
                address=G_ADDRESS[:-1],
                checksum_address=G_CHECKSUM_ADDRESS[:-1],
                public_key_hex=(G_X + G_Y).hex(),
            )

    def test_json_roundtrip(self, valid_record) -> None:
        restored = AddressRecord.model_validate_json(valid_record.model_dump_json())
        assert restored == valid_record

    def test_contract_dict(self, valid_record) -> None:
        assert valid_record.to_contract_dict() == {
            "key_name": "signer",
            "address": G_ADDRESS,
            "checksum_address": G_CHECKSUM_ADDRESS,
            "public_key_hex": (G_X + G_Y).hex(),
        }
