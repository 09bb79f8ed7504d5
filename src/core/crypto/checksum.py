"""
EIP-55 checksum-адреса.

Регистр каждой hex-буквы адреса задаётся соответствующим nibble
keccak256(ascii(lowercase_hex)): nibble >= 8 → верхний регистр.
"""

import re
from typing import Any

from src.core.crypto.errors import InvalidAddress
from src.core.crypto.hashing import keccak256
from src.core.domain.constants import ADDRESS_PREFIX, ANY_CASE_ADDRESS_PATTERN


_ADDRESS_RE = re.compile(ANY_CASE_ADDRESS_PATTERN)


def is_address(value: Any) -> bool:
    """Синтаксическая проверка: "0x" + 40 hex символов в любом регистре."""
    return isinstance(value, str) and _ADDRESS_RE.fullmatch(value) is not None


def to_checksum_address(address: str) -> str:
    """
    Перевод адреса в EIP-55 форму.

    Args:
        address: Адрес в любом регистре

    Returns:
        Адрес со смешанным регистром

    Raises:
        InvalidAddress: если строка не является адресом

    Examples:
        >>> to_checksum_address("0x7e5f4552091a69125d5dfcb7b8c2659029395bdf")
        '0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf'
    """
    if not is_address(address):
        raise InvalidAddress(f"Not a 20-byte hex address: {address!r}")

    hex_lower = address[len(ADDRESS_PREFIX):].lower()
    hash_hex = keccak256(hex_lower.encode("ascii")).hex()

    checksummed = "".join(
        char.upper() if char.isalpha() and int(hash_hex[i], 16) >= 8 else char
        for i, char in enumerate(hex_lower)
    )
    return ADDRESS_PREFIX + checksummed


def is_checksum_address(value: Any) -> bool:
    """True только для адреса в корректной EIP-55 форме."""
    if not is_address(value):
        return False
    return value == to_checksum_address(value)
