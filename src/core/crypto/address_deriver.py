"""
AddressDeriver — деривация адреса из публичного ключа secp256k1

Конвейер (чистые функции, без I/O и без состояния):
1. validate_point       — проверка ширины координат (+ удаление маркера 0x04)
2. to_public_key_buffer — X || Y
3. digest               — Keccak-256 (свежий контекст на каждый вызов)
4. derive_address       — "0x" + lowercase hex последних 20 байт дайджеста

Первая же ошибка прерывает конвейер и пробрасывается вызывающему.
Частичный адрес никогда не возвращается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Адрес всегда "0x" + 40 lowercase hex символов (42 символа)
2. Результат детерминирован для одинаковых (X, Y)
3. Приватный ключ никогда не передаётся в модуль
"""

from dataclasses import dataclass
from typing import Optional

from src.core.crypto.errors import InvalidDigestLength, InvalidPublicKey
from src.core.crypto.hashing import HashFunction, keccak256
from src.core.domain.constants import (
    ADDRESS_PREFIX,
    ADDRESS_SIZE_BYTES,
    COORDINATE_WIDTH_BYTES,
    DIGEST_SIZE_BYTES,
    UNCOMPRESSED_POINT_MARKER,
)
from src.core.domain.key_material import CurvePoint, DigestOutput, PublicKeyBuffer


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DeriverConfig:
    """Конфигурация адресной схемы.

    Значения по умолчанию: secp256k1 + Keccak-256 + 20-байтный адрес.

    strip_uncompressed_marker:
    - True: координата длиной width + 1 с первым байтом маркера принимается,
      маркер отбрасывается
    - False: любая длина кроме width → InvalidPublicKey
    """
    coordinate_width: int = COORDINATE_WIDTH_BYTES
    digest_size: int = DIGEST_SIZE_BYTES
    address_size: int = ADDRESS_SIZE_BYTES
    address_prefix: str = ADDRESS_PREFIX
    uncompressed_marker: int = UNCOMPRESSED_POINT_MARKER
    strip_uncompressed_marker: bool = True

    def __post_init__(self):
        if self.coordinate_width <= 0:
            raise ValueError(f"coordinate_width must be positive, got {self.coordinate_width}")
        if self.digest_size <= 0:
            raise ValueError(f"digest_size must be positive, got {self.digest_size}")
        if self.address_size <= 0:
            raise ValueError(f"address_size must be positive, got {self.address_size}")
        if self.address_size > self.digest_size:
            raise ValueError(
                f"address_size {self.address_size} exceeds digest_size {self.digest_size}"
            )
        if not 0 <= self.uncompressed_marker <= 0xFF:
            raise ValueError(
                f"uncompressed_marker must be a single byte, got {self.uncompressed_marker}"
            )

    @property
    def address_length(self) -> int:
        """Полная длина адреса в символах (префикс + hex)."""
        return len(self.address_prefix) + 2 * self.address_size


# =============================================================================
# ADDRESS DERIVER
# =============================================================================


class AddressDeriver:
    """Деривация адреса из координат публичного ключа.

    Stateless: экземпляр можно разделять между потоками без синхронизации.
    Хеш-функция подменяема (по умолчанию keccak256), поэтому длина дайджеста
    перепроверяется в derive_address.
    """

    def __init__(
        self,
        config: Optional[DeriverConfig] = None,
        hash_function: HashFunction = keccak256,
    ):
        self.config = config or DeriverConfig()
        self.hash_function = hash_function

    def validate_point(self, x: bytes, y: bytes) -> CurvePoint:
        """Проверка координат и приведение к канонической ширине.

        Args:
            x: Координата X (возможно с маркером 0x04)
            y: Координата Y (возможно с маркером 0x04)

        Returns:
            CurvePoint с координатами ровно coordinate_width байт

        Raises:
            InvalidPublicKey: если длина координаты некорректна
        """
        return CurvePoint(
            x=self._canonical_coordinate(x, "x"),
            y=self._canonical_coordinate(y, "y"),
        )

    def to_public_key_buffer(self, point: CurvePoint) -> PublicKeyBuffer:
        """X || Y без разделителей и без маркера."""
        return PublicKeyBuffer(data=point.x + point.y)

    def digest(self, buffer: PublicKeyBuffer) -> DigestOutput:
        """Хеширование всего буфера за один проход."""
        return DigestOutput(data=self.hash_function(buffer.data))

    def derive_address(self, digest_out: DigestOutput) -> str:
        """Извлечение адреса из дайджеста.

        Последние address_size байт → lowercase hex (ведущие нули сохраняются)
        с префиксом address_prefix.

        Raises:
            InvalidDigestLength: если дайджест не равен digest_size байт
        """
        if len(digest_out.data) != self.config.digest_size:
            raise InvalidDigestLength(
                f"Digest must be {self.config.digest_size} bytes, got {len(digest_out.data)}"
            )

        tail = digest_out.data[-self.config.address_size:]
        return self.config.address_prefix + tail.hex()

    def derive(self, x: bytes, y: bytes) -> str:
        """Полный конвейер: координаты → адрес.

        Raises:
            InvalidPublicKey: некорректные координаты
            InvalidDigestLength: хеш-функция вернула дайджест неверной длины
        """
        point = self.validate_point(x, y)
        buffer = self.to_public_key_buffer(point)
        return self.derive_address(self.digest(buffer))

    def derive_from_point(self, point: CurvePoint) -> str:
        """Деривация из уже построенного CurvePoint (ширина перепроверяется)."""
        return self.derive(point.x, point.y)

    def _canonical_coordinate(self, value: bytes, name: str) -> bytes:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InvalidPublicKey(
                f"Coordinate {name} must be bytes, got {type(value).__name__}"
            )

        value = bytes(value)
        width = self.config.coordinate_width

        if (
            self.config.strip_uncompressed_marker
            and len(value) == width + 1
            and value[0] == self.config.uncompressed_marker
        ):
            value = value[1:]

        if len(value) != width:
            raise InvalidPublicKey(
                f"Coordinate {name} must be {width} bytes, got {len(value)}"
            )
        return value


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Экземпляр по умолчанию (secp256k1 + Keccak-256)
_DEFAULT_DERIVER = AddressDeriver()


def validate_point(x: bytes, y: bytes) -> CurvePoint:
    """Проверка координат с конфигурацией по умолчанию."""
    return _DEFAULT_DERIVER.validate_point(x, y)


def to_public_key_buffer(point: CurvePoint) -> PublicKeyBuffer:
    return _DEFAULT_DERIVER.to_public_key_buffer(point)


def digest(buffer: PublicKeyBuffer) -> DigestOutput:
    return _DEFAULT_DERIVER.digest(buffer)


def derive_address(digest_out: DigestOutput) -> str:
    """Извлечение адреса из 32-байтного дайджеста."""
    return _DEFAULT_DERIVER.derive_address(digest_out)


def derive(x: bytes, y: bytes) -> str:
    """
    Деривация адреса из координат публичного ключа.

    Единственная точка входа для внешних вызывающих.

    Args:
        x: Координата X, 32 байта (или 33 с маркером 0x04)
        y: Координата Y, 32 байта (или 33 с маркером 0x04)

    Координата длиной 33 байта с маркером 0x04 принимается (маркер
    отбрасывается); для отказа на таком входе используйте
    AddressDeriver(DeriverConfig(strip_uncompressed_marker=False)).

    Returns:
        Адрес "0x" + 40 lowercase hex символов

    Raises:
        InvalidPublicKey: некорректные координаты
    """
    return _DEFAULT_DERIVER.derive(x, y)
