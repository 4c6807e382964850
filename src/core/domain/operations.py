"""
BigInt Operations — функциональный интерфейс

Именованные функции поверх операторов BigInt для кода, который
предпочитает явные вызовы операторному синтаксису.

Все функции, кроме make_from_string, тотальны и не бросают исключений
для валидных BigInt.
"""

from src.core.domain.bigint import BigInt
from src.core.domain.bigint_variable import BigIntVariable

# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def make_zero() -> BigInt:
    """Канонический ноль."""
    return BigInt.zero()


def make_from_integer(value: int) -> BigInt:
    """BigInt из int."""
    return BigInt.from_int(value)


def make_from_string(text: str) -> BigInt:
    """
    BigInt из десятичной строки.

    Raises:
        InvalidArgument: Пустая строка, недопустимый символ или нет цифр
    """
    return BigInt.from_string(text)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(lhs: BigInt, rhs: BigInt) -> BigInt:
    return lhs + rhs


def subtract(lhs: BigInt, rhs: BigInt) -> BigInt:
    return lhs - rhs


def multiply(lhs: BigInt, rhs: BigInt) -> BigInt:
    return lhs * rhs


def negate(value: BigInt) -> BigInt:
    return -value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def equals(lhs: BigInt, rhs: BigInt) -> bool:
    return lhs == rhs


def less_than(lhs: BigInt, rhs: BigInt) -> bool:
    return lhs < rhs


def less_or_equal(lhs: BigInt, rhs: BigInt) -> bool:
    return lhs <= rhs


def greater_than(lhs: BigInt, rhs: BigInt) -> bool:
    return lhs > rhs


def greater_or_equal(lhs: BigInt, rhs: BigInt) -> bool:
    return lhs >= rhs


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ
# =============================================================================


def increment(target: BigInt | BigIntVariable, postfix: bool = False) -> BigInt:
    """
    Инкремент значения или переменной.

    Для BigInt возвращается новое значение target + 1, операнд не меняется.
    Постфиксная форма для BigInt не определена: нет привязки, которую
    можно перепривязать.

    Args:
        target: BigInt или переменная, которая перепривязывается к value + 1
        postfix: True → вернуть предыдущее значение (x++),
                 False → вернуть новое значение (++x)

    Returns:
        Новое или предыдущее значение

    Raises:
        TypeError: postfix=True для BigInt или неподдерживаемый тип target
    """
    if isinstance(target, BigInt):
        if postfix:
            raise TypeError("postfix increment requires a BigIntVariable")
        return target.increment()

    if not isinstance(target, BigIntVariable):
        raise TypeError(f"increment expects BigInt or BigIntVariable, got {type(target).__name__}")

    if postfix:
        return target.post_increment()
    return target.pre_increment()


def decrement(target: BigInt | BigIntVariable, postfix: bool = False) -> BigInt:
    """
    Декремент значения или переменной.

    Для BigInt возвращается новое значение target - 1, операнд не меняется.
    Постфиксная форма для BigInt не определена.

    Args:
        target: BigInt или переменная, которая перепривязывается к value - 1
        postfix: True → вернуть предыдущее значение (x--),
                 False → вернуть новое значение (--x)

    Returns:
        Новое или предыдущее значение

    Raises:
        TypeError: postfix=True для BigInt или неподдерживаемый тип target
    """
    if isinstance(target, BigInt):
        if postfix:
            raise TypeError("postfix decrement requires a BigIntVariable")
        return target.decrement()

    if not isinstance(target, BigIntVariable):
        raise TypeError(f"decrement expects BigInt or BigIntVariable, got {type(target).__name__}")

    if postfix:
        return target.post_decrement()
    return target.pre_decrement()


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def to_decimal_string(value: BigInt) -> str:
    return value.to_decimal_string()
