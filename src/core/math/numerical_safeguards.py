"""
Numerical Safeguards — Проверки и округления для пороговой арифметики

Модуль обеспечивает единообразную работу с float во всех стратегиях:
- NaN/Inf проверка входных параметров (precision)
- Валидация диапазона с открытой/закрытой нижней границей
- floor/ceil с приведением к int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все сравнения с порогами (59 * precision и т.п.) выполняются в float
   без epsilon-коррекции: граничные значения совпадают с эталонным поведением
2. NaN/Inf никогда не проходят валидацию
3. floor_to_int/ceil_to_int никогда не возвращают float
"""

import math
from numbers import Real


# =============================================================================
# NaN/Inf ПРОВЕРКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение валидным конечным числом.

    bool не считается числом: True/False как precision — ошибка вызова.

    Examples:
        >>> is_valid_float(0.75)
        True
        >>> is_valid_float(float("nan"))
        False
        >>> is_valid_float(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
    min_exclusive: bool = False,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional, включительно)
        min_exclusive: Нижняя граница открытая (value > min_value)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value!r}")

    if min_value is not None:
        if min_exclusive and value <= min_value:
            raise ValueError(f"{name} must be > {min_value}, got {value}")
        if not min_exclusive and value < min_value:
            raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def floor_to_int(value: float) -> int:
    """
    floor(value) как int.

    Examples:
        >>> floor_to_int(40 / 29.5)
        1
        >>> floor_to_int(400 / 365)
        1
    """
    return int(math.floor(value))


def ceil_to_int(value: float) -> int:
    """
    ceil(value) как int.

    Examples:
        >>> ceil_to_int(400 / 365)
        2
        >>> ceil_to_int(60 / 30)
        2
    """
    return int(math.ceil(value))
