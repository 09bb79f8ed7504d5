"""
Key Encodings — приведение публичного ключа из форматов KMS к CurvePoint

Поддерживаемые форматы:
- SEC1 uncompressed point: 0x04 || X || Y (65 байт)
- cryptography EllipticCurvePublicKey (secp256k1)
- SubjectPublicKeyInfo в DER / PEM
- JSON Web Key (kty=EC, crv=P-256K, x/y в base64url)

Все адаптеры заканчиваются вызовом AddressDeriver.validate_point, поэтому
ширина координат проверяется в одном месте.
"""

import base64
import binascii
from typing import Any, Dict, Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jsonschema import ValidationError

from src.core.contracts.validators import EcPublicJwkValidator
from src.core.crypto.address_deriver import AddressDeriver
from src.core.crypto.errors import InvalidPublicKey
from src.core.domain.key_material import CurvePoint


_DEFAULT_DERIVER = AddressDeriver()


def _deriver_or_default(deriver: Optional[AddressDeriver]) -> AddressDeriver:
    return deriver if deriver is not None else _DEFAULT_DERIVER


# =============================================================================
# SEC1
# =============================================================================


def split_uncompressed_point(
    data: bytes, deriver: Optional[AddressDeriver] = None
) -> CurvePoint:
    """
    Разбор несжатой точки SEC1: marker || X || Y.

    Args:
        data: 1 + 2 * coordinate_width байт
        deriver: Определяет ширину координат и маркер (по умолчанию secp256k1)

    Raises:
        InvalidPublicKey: неверная длина или маркер
    """
    deriver = _deriver_or_default(deriver)
    config = deriver.config
    data = bytes(data)

    expected = 1 + 2 * config.coordinate_width
    if len(data) != expected:
        raise InvalidPublicKey(
            f"Uncompressed point must be {expected} bytes, got {len(data)}"
        )
    if data[0] != config.uncompressed_marker:
        raise InvalidPublicKey(
            f"Uncompressed point marker must be 0x{config.uncompressed_marker:02x}, "
            f"got 0x{data[0]:02x}"
        )

    body = data[1:]
    return deriver.validate_point(
        body[: config.coordinate_width], body[config.coordinate_width:]
    )


# =============================================================================
# CRYPTOGRAPHY KEYS (DER / PEM)
# =============================================================================


def point_from_public_key(
    public_key: Any, deriver: Optional[AddressDeriver] = None
) -> CurvePoint:
    """
    Координаты из cryptography EllipticCurvePublicKey на secp256k1.

    Raises:
        InvalidPublicKey: ключ не EC, кривая не secp256k1 или ширина координат
            deriver не совпадает с шириной кривой
    """
    if not isinstance(public_key, ec.EllipticCurvePublicKey):
        raise InvalidPublicKey(
            f"Expected an elliptic-curve public key, got {type(public_key).__name__}"
        )
    if not isinstance(public_key.curve, ec.SECP256K1):
        raise InvalidPublicKey(
            f"Public key curve is '{public_key.curve.name}', expected 'secp256k1'"
        )

    deriver = _deriver_or_default(deriver)
    width = deriver.config.coordinate_width
    curve_width = (public_key.curve.key_size + 7) // 8
    if width != curve_width:
        raise InvalidPublicKey(
            f"Deriver coordinate width {width} does not match curve width {curve_width}"
        )

    numbers = public_key.public_numbers()

    return deriver.validate_point(
        numbers.x.to_bytes(width, byteorder="big"),
        numbers.y.to_bytes(width, byteorder="big"),
    )


def point_from_der(data: bytes, deriver: Optional[AddressDeriver] = None) -> CurvePoint:
    """SubjectPublicKeyInfo (DER) → CurvePoint."""
    try:
        public_key = serialization.load_der_public_key(bytes(data))
    except (ValueError, UnsupportedAlgorithm) as e:
        raise InvalidPublicKey(f"Failed to load DER public key: {e}") from e
    return point_from_public_key(public_key, deriver)


def point_from_pem(
    data: Union[str, bytes], deriver: Optional[AddressDeriver] = None
) -> CurvePoint:
    """SubjectPublicKeyInfo (PEM) → CurvePoint."""
    if isinstance(data, str):
        data = data.encode("ascii")
    try:
        public_key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise InvalidPublicKey(f"Failed to load PEM public key: {e}") from e
    return point_from_public_key(public_key, deriver)


# =============================================================================
# JSON WEB KEY
# =============================================================================


def _b64url_decode(value: str, name: str) -> bytes:
    stripped = value.rstrip("=")
    try:
        return base64.urlsafe_b64decode(stripped + "=" * (-len(stripped) % 4))
    except (binascii.Error, ValueError) as e:
        raise InvalidPublicKey(f"JWK member '{name}' is not valid base64url: {e}") from e


def point_from_jwk(
    jwk: Dict[str, Any], deriver: Optional[AddressDeriver] = None
) -> CurvePoint:
    """
    Публичный EC ключ в формате JWK → CurvePoint.

    Контракт: src/core/contracts/schema/ec_public_jwk.json. JWK с приватной частью (d)
    отклоняется.

    Args:
        jwk: dict с полями kty, crv, x, y (base64url)

    Raises:
        InvalidPublicKey: нарушение контракта или неверная ширина координат
    """
    try:
        EcPublicJwkValidator().validate(jwk)
    except ValidationError as e:
        raise InvalidPublicKey(f"Invalid EC public JWK: {e.message}") from e

    return _deriver_or_default(deriver).validate_point(
        _b64url_decode(jwk["x"], "x"),
        _b64url_decode(jwk["y"], "y"),
    )
