"""Key Source — узкий интерфейс к внешнему хранилищу ключей (KMS / HSM / vault).

Хранилище отдаёт только публичную часть именованного EC ключа в виде двух
координат (X, Y). Приватная часть никогда не покидает хранилище.

Клиент хранилища передаётся явно (dependency injection), глобальной
конфигурации (URI хранилища, credentials) в модуле нет.
"""

from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from src.core.crypto.address_deriver import AddressDeriver
from src.core.crypto.encodings import point_from_jwk


class KeyNotFoundError(LookupError):
    """Ключ с указанным именем отсутствует в хранилище."""

    pass


class PublicKeySource(Protocol):
    """Источник публичных ключей по имени.

    Реализация может быть блокирующим вызовом SDK; ядро деривации
    синхронное и I/O не выполняет.
    """

    def get_public_key(self, key_name: str) -> Tuple[bytes, bytes]:
        """Вернуть координаты (X, Y) публичного ключа."""
        ...


class InMemoryKeySource:
    """Источник ключей в памяти (тесты, статическая конфигурация)."""

    def __init__(self, keys: Optional[Dict[str, Tuple[bytes, bytes]]] = None):
        self._keys: Dict[str, Tuple[bytes, bytes]] = dict(keys or {})

    def register(self, key_name: str, x: bytes, y: bytes) -> None:
        if not key_name:
            raise ValueError("key_name must be non-empty")
        self._keys[key_name] = (bytes(x), bytes(y))

    def get_public_key(self, key_name: str) -> Tuple[bytes, bytes]:
        try:
            return self._keys[key_name]
        except KeyError:
            raise KeyNotFoundError(f"Key not found: {key_name!r}") from None

    def __contains__(self, key_name: object) -> bool:
        return key_name in self._keys

    def __len__(self) -> int:
        return len(self._keys)


class JwkKeySource:
    """Адаптер для хранилищ, которые отдают публичный ключ в формате JWK.

    fetch_jwk — вызов SDK хранилища: имя ключа → dict JWK
    (kty, crv, x, y в base64url). Ошибки fetch_jwk пробрасываются как есть.
    """

    def __init__(
        self,
        fetch_jwk: Callable[[str], Dict[str, Any]],
        deriver: Optional[AddressDeriver] = None,
    ):
        self._fetch_jwk = fetch_jwk
        self._deriver = deriver

    def get_public_key(self, key_name: str) -> Tuple[bytes, bytes]:
        point = point_from_jwk(self._fetch_jwk(key_name), self._deriver)
        return point.x, point.y
