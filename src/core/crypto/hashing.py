"""
Hashing — Keccak-256 для адресной схемы

ВАЖНО: используется исходный Keccak-256 (padding 0x01), а не стандартизированный
SHA3-256 из FIPS 202 (padding 0x06). На одинаковом входе они дают разные
дайджесты, и адрес, посчитанный через hashlib.sha3_256, будет неверным.

    keccak256(b"")   = c5d24601...5d85a470
    sha3_256(b"")    = a7ffc6f8...80f8434a
"""

from typing import Callable, Final

from Crypto.Hash import keccak


# Подменяемый шаг хеширования: bytes -> digest bytes
HashFunction = Callable[[bytes], bytes]

KECCAK_256_DIGEST_BITS: Final[int] = 256


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 дайджест за один проход.

    Каждый вызов создаёт новый hash-объект, состояние между вызовами не разделяется.

    Args:
        data: Входные байты

    Returns:
        32 байта дайджеста

    Examples:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    hasher = keccak.new(digest_bits=KECCAK_256_DIGEST_BITS)
    hasher.update(bytes(data))
    return hasher.digest()
