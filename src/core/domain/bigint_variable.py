"""BigIntVariable — изменяемая привязка к неизменяемому BigInt.

Моделирует составное присваивание (+=, -=, *=) и префиксный/постфиксный
инкремент/декремент: каждая операция вычисляет новый BigInt и
перепривязывает value. Сам BigInt никогда не изменяется, поэтому
значения, возвращённые ранее, остаются корректными копиями.
"""

from typing import Union

from src.core.domain.bigint import BigInt

BigIntLike = Union[BigInt, int]


class BigIntVariable:
    """Переменная, хранящая текущее значение BigInt.

    Examples:
        >>> counter = BigIntVariable(999)
        >>> str(counter.post_increment())
        '999'
        >>> str(counter.value)
        '1000'
    """

    def __init__(self, value: BigIntLike | None = None):
        """
        Args:
            value: начальное значение (default: ноль)
        """
        self.value = _as_bigint(value) if value is not None else BigInt.zero()

    # Составное присваивание

    def __iadd__(self, other: BigIntLike) -> "BigIntVariable":
        self.value = self.value + _as_bigint(other)
        return self

    def __isub__(self, other: BigIntLike) -> "BigIntVariable":
        self.value = self.value - _as_bigint(other)
        return self

    def __imul__(self, other: BigIntLike) -> "BigIntVariable":
        self.value = self.value * _as_bigint(other)
        return self

    # Инкремент / декремент

    def pre_increment(self) -> BigInt:
        """++x: перепривязка и возврат нового значения."""
        self.value = self.value.increment()
        return self.value

    def post_increment(self) -> BigInt:
        """x++: перепривязка и возврат предыдущего значения."""
        previous = self.value
        self.value = self.value.increment()
        return previous

    def pre_decrement(self) -> BigInt:
        """--x: перепривязка и возврат нового значения."""
        self.value = self.value.decrement()
        return self.value

    def post_decrement(self) -> BigInt:
        """x--: перепривязка и возврат предыдущего значения."""
        previous = self.value
        self.value = self.value.decrement()
        return previous

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"BigIntVariable({self.value!r})"


def _as_bigint(value: BigIntLike) -> BigInt:
    if isinstance(value, BigInt):
        return value
    return BigInt.from_int(value)
