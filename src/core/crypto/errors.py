"""
Ошибки деривации адреса.

Все ошибки локальные и не требуют retry: причина всегда в некорректном входе
(или в подменённой хеш-функции), а не во временном сбое.
"""


class AddressDerivationError(ValueError):
    """Базовая ошибка конвейера деривации адреса."""

    pass


class InvalidPublicKey(AddressDerivationError):
    """
    Координаты публичного ключа имеют неожиданную длину
    (после опционального удаления маркера 0x04) или ключ не удалось декодировать.
    """

    pass


class InvalidDigestLength(AddressDerivationError):
    """
    Дайджест не совпадает с ожидаемой длиной.

    Нарушение контракта между шагом хеширования и извлечением адреса.
    """

    pass


class InvalidAddress(AddressDerivationError):
    """Строка не является адресом вида 0x + 40 hex символов."""

    pass
