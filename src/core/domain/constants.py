"""
Константы схемы адресации secp256k1 + Keccak-256

Единственный источник фиксированных размеров для:
- координат публичного ключа (X, Y)
- дайджеста хеш-функции
- текстового адреса (префикс + hex последних байт дайджеста)
"""

from typing import Final


# =============================================================================
# КРИВАЯ
# =============================================================================
# Ширина одной координаты точки secp256k1 (big-endian, байты)
COORDINATE_WIDTH_BYTES: Final[int] = 32

# Длина несжатого публичного ключа без маркера: X || Y
PUBLIC_KEY_BUFFER_BYTES: Final[int] = 2 * COORDINATE_WIDTH_BYTES

# Маркер несжатой точки SEC1 (0x04 || X || Y)
UNCOMPRESSED_POINT_MARKER: Final[int] = 0x04

# Длина несжатой точки SEC1 вместе с маркером
UNCOMPRESSED_POINT_BYTES: Final[int] = 1 + PUBLIC_KEY_BUFFER_BYTES


# =============================================================================
# ДАЙДЖЕСТ И АДРЕС
# =============================================================================
# Keccak-256 всегда даёт 32 байта
DIGEST_SIZE_BYTES: Final[int] = 32

# Адрес = последние 20 байт дайджеста (смещение 12..31)
ADDRESS_SIZE_BYTES: Final[int] = 20

ADDRESS_PREFIX: Final[str] = "0x"

# 2 символа префикса + 40 hex символов
ADDRESS_LENGTH_CHARS: Final[int] = len(ADDRESS_PREFIX) + 2 * ADDRESS_SIZE_BYTES

# Канонический (lowercase) адрес
ADDRESS_PATTERN: Final[str] = r"^0x[0-9a-f]{40}$"

# Адрес в любом регистре (в т.ч. EIP-55)
ANY_CASE_ADDRESS_PATTERN: Final[str] = r"^0x[0-9a-fA-F]{40}$"
