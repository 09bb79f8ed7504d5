"""
Key Material — Модели публичного ключа и дайджеста

Immutable Pydantic модели для промежуточных значений конвейера деривации:
CurvePoint → PublicKeyBuffer → DigestOutput.

Все значения транзиентные: создаются и потребляются в рамках одного вызова.
Приватный ключ в этих моделях никогда не хранится.
"""

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# CURVE POINT
# =============================================================================


class CurvePoint(BaseModel):
    """
    Точка эллиптической кривой (публичный ключ) в виде двух координат.

    Координаты — big-endian байты фиксированной ширины, без маркера 0x04.
    Ширина не зашита в модель: её проверяет AddressDeriver согласно конфигурации.
    """

    x: bytes = Field(..., min_length=1, description="Координата X (big-endian)")
    y: bytes = Field(..., min_length=1, description="Координата Y (big-endian)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_equal_width(self) -> "CurvePoint":
        """Обе координаты должны иметь одинаковую ширину."""
        if len(self.x) != len(self.y):
            raise ValueError(
                f"Coordinate widths differ: len(x)={len(self.x)}, len(y)={len(self.y)}"
            )
        return self

    @property
    def width(self) -> int:
        """Ширина одной координаты в байтах."""
        return len(self.x)

    def to_hex(self) -> str:
        """X || Y в lowercase hex (без префикса)."""
        return (self.x + self.y).hex()


# =============================================================================
# PUBLIC KEY BUFFER
# =============================================================================


class PublicKeyBuffer(BaseModel):
    """
    Несжатый публичный ключ без маркера: X || Y.

    Длина всегда чётная (две координаты одинаковой ширины).
    """

    data: bytes = Field(..., min_length=2, description="X || Y")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_even_length(self) -> "PublicKeyBuffer":
        if len(self.data) % 2 != 0:
            raise ValueError(f"Public key buffer length {len(self.data)} is not even")
        return self

    def __len__(self) -> int:
        return len(self.data)


# =============================================================================
# DIGEST OUTPUT
# =============================================================================


class DigestOutput(BaseModel):
    """
    Результат хеш-функции.

    Длину здесь не фиксируем: подменяемая хеш-функция может вернуть что угодно,
    проверка длины выполняется на границе derive_address.
    """

    data: bytes = Field(..., description="Байты дайджеста")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.data)
