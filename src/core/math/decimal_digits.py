"""
Decimal Digits — Digit-Vector Primitives

Модуль содержит примитивы над десятичными digit-векторами, на которых
построен BigInt:
- Нормализация (удаление старших нулей)
- Сравнение модулей (abs_less)
- Schoolbook сложение / вычитание / умножение модулей
- Извлечение цифр из int, разбор и форматирование десятичной строки

Представление: list[int], цифры 0..9, младшая цифра первой
(least-significant first). Знак хранится отдельно и здесь не обрабатывается,
кроме разбора и форматирования строки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (для нормализованного вектора):
1. Вектор не пустой (минимум одна цифра)
2. Нет старших нулей, кроме значения ноль == [0]
3. Каждая цифра в диапазоне [0, 9]
4. Все функции чистые: входные списки не изменяются
"""

import logging
from typing import Final, Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (только десятичная)
RADIX: Final[int] = 10

# Допустимый диапазон одной цифры
MIN_DIGIT: Final[int] = 0
MAX_DIGIT: Final[int] = RADIX - 1

# Маркер знака в десятичной записи
NEGATIVE_SIGN: Final[str] = "-"

# Только ASCII цифры (str.isdigit() пропускает Unicode-цифры, например "٣")
DECIMAL_DIGITS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Невалидная десятичная строка при конструировании BigInt.

    Возникает в трёх случаях:
    1. Пустая строка
    2. Символ, не являющийся ASCII цифрой (кроме ведущего '-')
    3. После ведущего '-' нет ни одной цифры
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def validate_digits(digits: Sequence[int]) -> None:
    """
    Валидация digit-вектора: не пустой, каждая цифра в [0, 9].

    Args:
        digits: Вектор цифр (младшая первой)

    Raises:
        ValueError: Если вектор пустой или содержит цифру вне диапазона
    """
    if len(digits) == 0:
        raise ValueError("digits must contain at least one digit")

    for position, digit in enumerate(digits):
        if not MIN_DIGIT <= digit <= MAX_DIGIT:
            raise ValueError(
                f"digit at position {position} must be in "
                f"[{MIN_DIGIT}, {MAX_DIGIT}], got {digit}"
            )


def is_normalized(digits: Sequence[int]) -> bool:
    """
    Проверка канонической формы: нет старших нулей (кроме [0]).

    Args:
        digits: Непустой вектор цифр

    Returns:
        True если вектор не содержит лишних старших нулей
    """
    return len(digits) == 1 or digits[-1] != 0


def normalize_digits(digits: Sequence[int]) -> list[int]:
    """
    Удаление старших нулей из digit-вектора.

    Старшие цифры хранятся в конце списка, поэтому удаляются хвостовые нули,
    пока не останется ненулевая старшая цифра или ровно одна цифра.

    Args:
        digits: Вектор цифр (младшая первой); пустой вектор трактуется как ноль

    Returns:
        Новый нормализованный вектор

    Examples:
        >>> normalize_digits([7, 0, 0])
        [7]
        >>> normalize_digits([0, 0, 0])
        [0]
    """
    result = list(digits)

    while len(result) > 1 and result[-1] == 0:
        result.pop()

    if not result:
        result.append(0)

    return result


def is_zero_digits(digits: Sequence[int]) -> bool:
    """True если нормализованный вектор представляет ноль."""
    return len(digits) == 1 and digits[0] == 0


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def abs_less(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    """
    Сравнение модулей: |lhs| < |rhs|.

    Алгоритм:
    1. Разная длина → короче значит меньше (корректно только для
       нормализованных векторов без старших нулей)
    2. Одинаковая длина → поразрядно от старшей цифры к младшей,
       первая различающаяся цифра определяет результат
    3. Равные векторы → False

    Args:
        lhs: Нормализованный вектор цифр
        rhs: Нормализованный вектор цифр

    Returns:
        True если модуль lhs строго меньше модуля rhs

    Examples:
        >>> abs_less([9], [0, 1])
        True
        >>> abs_less([1, 2], [2, 1])
        False
        >>> abs_less([5], [5])
        False
    """
    if len(lhs) != len(rhs):
        return len(lhs) < len(rhs)

    for left_digit, right_digit in zip(reversed(lhs), reversed(rhs)):
        if left_digit != right_digit:
            return left_digit < right_digit

    return False


# =============================================================================
# SCHOOLBOOK АРИФМЕТИКА МОДУЛЕЙ
# =============================================================================


def add_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом (schoolbook).

    Проход от младшего разряда к старшему по длине большего операнда плюс
    один разряд на финальный перенос. Отсутствующие разряды операнда = 0.

    Args:
        lhs: Вектор цифр
        rhs: Вектор цифр

    Returns:
        Нормализованный вектор |lhs| + |rhs|

    Examples:
        >>> add_magnitudes([9, 9], [1])
        [0, 0, 1]
    """
    max_size = max(len(lhs), len(rhs))
    result: list[int] = []

    carry = 0
    position = 0
    while position < max_size or carry > 0:
        total = carry
        if position < len(lhs):
            total += lhs[position]
        if position < len(rhs):
            total += rhs[position]

        result.append(total % RADIX)
        carry = total // RADIX
        position += 1

    return normalize_digits(result)


def sub_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Вычитание модулей с заёмом (schoolbook): |larger| - |smaller|.

    Если разность в разряде отрицательна, занимаем 1×RADIX из следующего
    разряда.

    Args:
        larger: Нормализованный вектор с модулем >= smaller
        smaller: Нормализованный вектор

    Returns:
        Нормализованный вектор разности (ноль → [0])

    Raises:
        ValueError: Если |larger| < |smaller|

    Examples:
        >>> sub_magnitudes([0, 0, 1], [1])
        [9, 9]
    """
    if abs_less(larger, smaller):
        raise ValueError("sub_magnitudes requires |larger| >= |smaller|")

    result: list[int] = []

    borrow = 0
    for position, digit in enumerate(larger):
        subtrahend = smaller[position] if position < len(smaller) else 0
        difference = digit - borrow - subtrahend

        if difference < 0:
            difference += RADIX
            borrow = 1
        else:
            borrow = 0

        result.append(difference)

    return normalize_digits(result)


def mul_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """
    Умножение модулей в столбик (schoolbook, O(n·m)).

    Результат инициализируется нулями длины len(lhs) + len(rhs). Для каждой
    пары разрядов (i, j): result[i+j] += lhs[i] * rhs[j] + carry, перенос
    продолжает распространяться за пределы rhs, пока он ненулевой.

    Args:
        lhs: Вектор цифр
        rhs: Вектор цифр

    Returns:
        Нормализованный вектор |lhs| × |rhs|

    Examples:
        >>> mul_magnitudes([2, 1], [2, 1])
        [4, 4, 1]
    """
    result = [0] * (len(lhs) + len(rhs))

    for i, left_digit in enumerate(lhs):
        carry = 0
        j = 0
        while j < len(rhs) or carry > 0:
            right_digit = rhs[j] if j < len(rhs) else 0
            product = result[i + j] + left_digit * right_digit + carry
            result[i + j] = product % RADIX
            carry = product // RADIX
            j += 1

    return normalize_digits(result)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def digits_from_int(value: int) -> list[int]:
    """
    Извлечение цифр модуля int (младшая первой).

    Знак отбрасывается: abs() в Python не переполняется, поэтому
    минимальное int64 (-9223372036854775808) обрабатывается без особого случая.
    Ноль возвращается напрямую как [0], не через цикл.

    Args:
        value: Целое число любого знака

    Returns:
        Нормализованный вектор цифр |value|

    Examples:
        >>> digits_from_int(-120)
        [0, 2, 1]
    """
    if value == 0:
        return [0]

    remaining = abs(value)
    digits: list[int] = []
    while remaining > 0:
        digits.append(remaining % RADIX)
        remaining //= RADIX

    return digits


def parse_decimal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор десятичной строки с необязательным ведущим '-'.

    Ведущие нули допускаются и удаляются нормализацией ("007" → [7]).
    Знак "-0" возвращается как есть; приведение нуля к неотрицательному
    выполняет вызывающий код (BigInt).

    Args:
        text: Десятичная запись, например "-12345"

    Returns:
        (is_negative, digits) — знак и нормализованный вектор цифр

    Raises:
        InvalidArgument: Пустая строка, недопустимый символ или нет цифр

    Examples:
        >>> parse_decimal("-007")
        (True, [7])
    """
    if not text:
        logger.debug("Rejected decimal literal: empty string")
        raise InvalidArgument("Empty string")

    is_negative = text[0] == NEGATIVE_SIGN
    body = text[1:] if is_negative else text

    digits: list[int] = []
    for char in body:
        if char not in DECIMAL_DIGITS:
            logger.debug("Rejected decimal literal %r: invalid character %r", text, char)
            raise InvalidArgument(f"Invalid character {char!r} in {text!r}")
        digits.append(ord(char) - ord("0"))

    if not digits:
        logger.debug("Rejected decimal literal %r: no digits", text)
        raise InvalidArgument("String does not contain any digits")

    digits.reverse()
    return is_negative, normalize_digits(digits)


def format_decimal(is_negative: bool, digits: Sequence[int]) -> str:
    """
    Форматирование в десятичную строку: '-' только при is_negative,
    затем цифры от старшей к младшей.

    Args:
        is_negative: Флаг знака
        digits: Нормализованный вектор цифр (младшая первой)

    Returns:
        Каноническая десятичная запись без разделителей и пробелов
    """
    body = "".join(DECIMAL_DIGITS[digit] for digit in reversed(digits))
    if is_negative:
        return NEGATIVE_SIGN + body
    return body
