"""Address Resolver — адрес для именованного ключа из хранилища.

Связывает PublicKeySource (внешний коллаборатор) с AddressDeriver.
Ошибки источника (KeyNotFoundError, ошибки SDK) и деривации
(InvalidPublicKey) пробрасываются вызывающему без изменений: решение
о повторном запросе ключа принимает вызывающий.
"""

from typing import Dict, Iterable, Optional

from src.core.crypto.address_deriver import AddressDeriver
from src.core.crypto.checksum import to_checksum_address
from src.core.domain.address_record import AddressRecord
from src.core.domain.constants import ADDRESS_PREFIX, ADDRESS_SIZE_BYTES
from src.keysource.source import PublicKeySource


class AddressResolver:
    """Резолвер адресов поверх источника публичных ключей."""

    def __init__(self, source: PublicKeySource, deriver: Optional[AddressDeriver] = None):
        self.source = source
        self.deriver = deriver or AddressDeriver()

        # AddressRecord и EIP-55 определены только для "0x" + 20 байт
        config = self.deriver.config
        if config.address_prefix != ADDRESS_PREFIX or config.address_size != ADDRESS_SIZE_BYTES:
            raise ValueError(
                f"AddressResolver requires {ADDRESS_PREFIX!r} + {ADDRESS_SIZE_BYTES}-byte addresses, "
                f"got prefix={config.address_prefix!r} address_size={config.address_size}"
            )

    def resolve(self, key_name: str) -> AddressRecord:
        """Получить публичный ключ по имени и вывести адрес.

        Args:
            key_name: Имя ключа в хранилище

        Returns:
            AddressRecord с lowercase и EIP-55 адресом

        Raises:
            KeyNotFoundError: ключ отсутствует в источнике
            InvalidPublicKey: источник вернул некорректные координаты
        """
        x, y = self.source.get_public_key(key_name)
        point = self.deriver.validate_point(x, y)
        address = self.deriver.derive_address(
            self.deriver.digest(self.deriver.to_public_key_buffer(point))
        )

        return AddressRecord(
            key_name=key_name,
            address=address,
            checksum_address=to_checksum_address(address),
            public_key_hex=point.to_hex(),
        )

    def resolve_many(self, key_names: Iterable[str]) -> Dict[str, AddressRecord]:
        """Резолв нескольких ключей; первая ошибка прерывает обработку."""
        return {key_name: self.resolve(key_name) for key_name in key_names}
