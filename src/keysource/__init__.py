"""Key Source — интеграция с внешним хранилищем ключей.

- PublicKeySource: протокол "получить публичный ключ по имени"
- InMemoryKeySource / JwkKeySource: реализации
- AddressResolver: имя ключа → AddressRecord
"""

from .resolver import AddressResolver
from .source import (
    InMemoryKeySource,
    JwkKeySource,
    KeyNotFoundError,
    PublicKeySource,
)

__all__ = [
    "AddressResolver",
    "InMemoryKeySource",
    "JwkKeySource",
    "KeyNotFoundError",
    "PublicKeySource",
]
