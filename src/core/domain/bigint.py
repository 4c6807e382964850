"""
BigInt — Знаковое целое произвольной точности

Immutable Pydantic модель в sign-magnitude представлении:
- magnitude: десятичные цифры модуля, младшая первой
- is_negative: флаг знака (ноль всегда неотрицательный)

Каждая операция возвращает новый BigInt, операнды не изменяются.
Арифметика делегируется примитивам src.core.math.decimal_digits.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются валидаторами при создании):
1. magnitude не пустой
2. Нет старших нулей, кроме значения ноль == (0,)
3. Каждая цифра в [0, 9]
4. Ноль всегда с is_negative=False (нет "-0")
5. Равенство значений ⇔ равенство пар (is_negative, magnitude)
"""

from typing import Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.decimal_digits import (
    abs_less,
    add_magnitudes,
    digits_from_int,
    format_decimal,
    is_normalized,
    is_zero_digits,
    mul_magnitudes,
    normalize_digits,
    parse_decimal,
    sub_magnitudes,
    validate_digits,
)


class BigInt(BaseModel):
    """
    Знаковое целое произвольной точности.

    BigInt() создаёт ноль. Для остальных значений используются
    BigInt.from_int и BigInt.from_string.

    Поддерживаемые операторы: +, -, *, унарные - и +, ==, !=, <, <=, >, >=.
    int-операнд с любой стороны приводится через BigInt.from_int.

    Прямое создание BigInt(magnitude=..., is_negative=...) строгое:
    цифры только int, знак только bool, пара должна быть канонической.
    model_copy(update=...) не поддерживается для создания BigInt:
    pydantic пропускает валидаторы и может получиться "-0".
    """

    magnitude: tuple[int, ...] = Field(
        default=(0,),
        min_length=1,
        description="Цифры модуля, младшая первой",
    )
    is_negative: bool = Field(default=False, description="Флаг знака")

    model_config = {"frozen": True, "strict": True}  # Immutable, без приведения типов

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждая цифра в [0, 9]."""
        validate_digits(v)
        return v

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "BigInt":
        """
        Каноническая форма: нет старших нулей и нет отрицательного нуля.

        Неканоническая пара отклоняется, а не исправляется молча:
        внутренний код всегда нормализует до создания модели.
        """
        if not is_normalized(self.magnitude):
            raise ValueError(f"magnitude has leading zeros: {self.magnitude}")
        if self.is_negative and is_zero_digits(self.magnitude):
            raise ValueError("zero cannot be negative")
        return self

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "BigInt":
        """Канонический ноль: magnitude=(0,), is_negative=False."""
        return cls()

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Создание из int.

        Args:
            value: Целое число (любая разрядность)

        Returns:
            BigInt с тем же значением

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"BigInt.from_int expects int, got {type(value).__name__}")

        if value == 0:
            return cls.zero()

        return cls(magnitude=tuple(digits_from_int(value)), is_negative=value < 0)

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """
        Создание из десятичной строки с необязательным ведущим '-'.

        Ведущие нули удаляются ("007" → 7), "-0" приводится к нулю.

        Raises:
            InvalidArgument: Пустая строка, недопустимый символ или нет цифр
        """
        is_negative, digits = parse_decimal(text)
        return cls._normalized(is_negative, digits)

    @classmethod
    def _normalized(cls, is_negative: bool, digits: Sequence[int]) -> "BigInt":
        """Нормализация вектора и знака нуля, затем создание модели."""
        normalized = normalize_digits(digits)
        if is_zero_digits(normalized):
            is_negative = False
        return cls(magnitude=tuple(normalized), is_negative=is_negative)

    @classmethod
    def _coerce(cls, other: object) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return cls.from_int(other)
        return None

    # =========================================================================
    # АРИФМЕТИКА МОДУЛЕЙ
    # =========================================================================

    def _add_magnitudes(self, other: "BigInt") -> "BigInt":
        """|self| + |other| со знаком self."""
        return self._normalized(
            self.is_negative, add_magnitudes(self.magnitude, other.magnitude)
        )

    def _subtract_magnitudes(self, other: "BigInt") -> "BigInt":
        """
        self - other через разность модулей.

        Знак результата:
        - Знаки различаются → знак self (модули складываются)
        - Знаки совпадают, |self| >= |other| → общий знак
        - Знаки совпадают, |self| < |other| → противоположный общему
          ((-5) - (-10) = 5, 3 - 7 = -4)
        """
        if self.is_negative != other.is_negative:
            # Сумма модулей, а не разность: a - b == a + |b| при разных знаках
            return self._add_magnitudes(other)

        rhs_larger = abs_less(self.magnitude, other.magnitude)
        if rhs_larger:
            digits = sub_magnitudes(other.magnitude, self.magnitude)
            return self._normalized(not self.is_negative, digits)

        digits = sub_magnitudes(self.magnitude, other.magnitude)
        return self._normalized(self.is_negative, digits)

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_negative == rhs.is_negative:
            return self._add_magnitudes(rhs)
        # a + b == a - (-b), где -b имеет знак a
        return self._subtract_magnitudes(-rhs)

    def __radd__(self, other: object) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_negative == rhs.is_negative:
            return self._subtract_magnitudes(rhs)
        return self._add_magnitudes(rhs)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        return self._normalized(
            self.is_negative != rhs.is_negative,
            mul_magnitudes(self.magnitude, rhs.magnitude),
        )

    def __rmul__(self, other: object) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __neg__(self) -> "BigInt":
        return self._normalized(not self.is_negative, self.magnitude)

    def __pos__(self) -> "BigInt":
        return self

    def increment(self) -> "BigInt":
        """self + 1 (новый объект)."""
        return self + BigInt.from_int(1)

    def decrement(self) -> "BigInt":
        """self - 1 (новый объект)."""
        return self - BigInt.from_int(1)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.is_negative == rhs.is_negative and self.magnitude == rhs.magnitude

    def __hash__(self) -> int:
        return hash((self.is_negative, self.magnitude))

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_negative != rhs.is_negative:
            return self.is_negative
        if not self.is_negative:
            return abs_less(self.magnitude, rhs.magnitude)
        # Оба отрицательные: больший модуль значит меньшее число
        return abs_less(rhs.magnitude, self.magnitude)

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self < rhs or self == rhs

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self <= rhs

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def is_zero(self) -> bool:
        return is_zero_digits(self.magnitude)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def to_decimal_string(self) -> str:
        """
        Каноническая десятичная запись.

        '-' только для отрицательных, без старших нулей, ноль всегда "0".
        """
        return format_decimal(self.is_negative, self.magnitude)

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_decimal_string()}')"
