"""
Orthants - нумерация ортантов n-мерного пространства

Ортант: одна из 2^dims областей пространства, в которой знак каждой
координаты фиксирован (обобщение квадранта/октанта).

Модуль содержит ЧИСТЫЕ функции (без кэшей):
- Подсчёт количества ортантов 2^dims
- Генерация упорядоченной последовательности знаковых паттернов
- Обратный поиск номера ортанта по координатам

КАНОНИЧЕСКАЯ НУМЕРАЦИЯ (публичный контракт, не деталь реализации):
    1. Декартово произведение dims копий {-1, +1}
    2. Лексикографическая сортировка (координата 0 старшая, -1 < 1) → S
    3. half = count / 2
       output = первые half элементов reverse(S) ++ первые half элементов S
    4. Ортант k = output[k - 1]

    Пример (2D):
        S      = [-1,-1], [-1,1], [1,-1], [1,1]
        output = [1,1], [1,-1], [-1,-1], [-1,1]
        ортант 1 = [1, 1], ортант 3 = [-1, -1]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нумерация: биекция между 1..2^dims и всеми ±1 последовательностями длины dims
2. count(dims) определён только для 0 < dims < 31 (2^dims в int32)
3. Нарушение предусловий → OrthantPreconditionError (никакого clamp)
"""

import logging
import math
from typing import Final, Sequence

from src.core.math.combinations import list_combinations

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальная размерность для подсчёта ортантов: 2^30 < 2^31 - 1
MAX_COUNT_DIMS: Final[int] = 30

SIGN_NEGATIVE: Final[int] = -1
SIGN_POSITIVE: Final[int] = 1

# Набор выбора для каждого измерения
SIGN_CHOICES: Final[tuple[int, int]] = (SIGN_NEGATIVE, SIGN_POSITIVE)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrthantPreconditionError(ValueError):
    """
    Нарушение предусловия операции над ортантами.

    Ошибка контракта вызывающей стороны, а не транзиентный сбой: повтор
    с теми же аргументами всегда упадёт снова.
    """

    def __init__(self, message: str, dims: object = None, orthant: object = None):
        super().__init__(message)
        self.dims = dims
        self.orthant = orthant


class InvalidDimensionError(OrthantPreconditionError):
    """dims не положительное целое или dims > MAX_COUNT_DIMS при подсчёте."""
    pass


class OrthantOutOfRangeError(OrthantPreconditionError):
    """Номер ортанта вне [1, 2^dims]."""
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_dims(dims: int, max_dims: int | None = MAX_COUNT_DIMS) -> None:
    """
    Валидация размерности пространства.

    Args:
        dims: Количество измерений
        max_dims: Верхняя граница (включительно); None = без ограничения

    Raises:
        InvalidDimensionError: Если dims не int, dims <= 0 или dims > max_dims
    """
    if isinstance(dims, bool) or not isinstance(dims, int):
        raise InvalidDimensionError(f"dims must be an integer, got {dims!r}", dims=dims)

    if dims <= 0:
        raise InvalidDimensionError(f"dims must be positive, got {dims}", dims=dims)

    if max_dims is not None and dims > max_dims:
        raise InvalidDimensionError(
            f"dims must be <= {max_dims}, got {dims}",
            dims=dims,
        )


def validate_orthant(dims: int, orthant: int, count: int) -> None:
    """
    Валидация номера ортанта.

    Args:
        dims: Количество измерений (для сообщения об ошибке)
        orthant: Номер ортанта (начиная с 1)
        count: Количество ортантов для dims

    Raises:
        OrthantOutOfRangeError: Если orthant не int или вне [1, count]
    """
    if isinstance(orthant, bool) or not isinstance(orthant, int):
        raise OrthantOutOfRangeError(
            f"orthant must be an integer, got {orthant!r}", dims=dims, orthant=orthant
        )

    if not 1 <= orthant <= count:
        raise OrthantOutOfRangeError(
            f"orthant {orthant} out of range [1, {count}] for dims={dims}",
            dims=dims,
            orthant=orthant,
        )


# =============================================================================
# ПОДСЧЁТ И ГЕНЕРАЦИЯ
# =============================================================================


def compute_orthant_count(dims: int, max_dims: int = MAX_COUNT_DIMS) -> int:
    """
    Количество ортантов в пространстве размерности dims.

    Args:
        dims: Количество измерений (0 < dims <= max_dims)
        max_dims: Верхняя граница dims (не больше MAX_COUNT_DIMS)

    Returns:
        2^dims

    Raises:
        InvalidDimensionError: При нарушении предусловий на dims

    Examples:
        >>> compute_orthant_count(2)
        4
        >>> compute_orthant_count(3)
        8
    """
    validate_dims(dims, max_dims=min(max_dims, MAX_COUNT_DIMS))
    return 1 << dims


def generate_sign_patterns(
    dims: int,
    count: int | None = None,
    max_dims: int = MAX_COUNT_DIMS,
) -> list[tuple[int, ...]]:
    """
    Все знаковые паттерны в канонической нумерации ортантов.

    Элемент с индексом k - 1 соответствует ортанту k.

    Args:
        dims: Количество измерений
        count: Уже известное количество ортантов (например, из кэша);
            должно совпадать с 2^dims
        max_dims: Верхняя граница dims

    Returns:
        Список из 2^dims кортежей длины dims со значениями -1 / 1

    Raises:
        InvalidDimensionError: При нарушении предусловий на dims
        OrthantPreconditionError: Если count != 2^dims

    Examples:
        >>> generate_sign_patterns(2)
        [(1, 1), (1, -1), (-1, -1), (-1, 1)]
    """
    expected = compute_orthant_count(dims, max_dims=max_dims)
    if count is None:
        count = expected
    elif isinstance(count, bool) or count != expected:
        raise OrthantPreconditionError(
            f"count {count!r} does not match 2^{dims} = {expected}", dims=dims
        )
    logger.debug("Generating %d sign patterns for dims=%d", count, dims)

    # Порядок генерации не важен: сразу пересортировываем
    combos = list_combinations([SIGN_CHOICES] * dims)
    ordered = sorted(tuple(combo) for combo in combos)

    half = count // 2
    return ordered[::-1][:half] + ordered[:half]


def orthant_of(coords: Sequence[float], max_dims: int = MAX_COUNT_DIMS) -> int:
    """
    Номер ортанта, содержащего точку с заданными координатами.

    Обратная операция к generate_sign_patterns, вычисляется без генерации:
    индекс i паттерна в отсортированной последовательности S есть двоичное
    число (бит 1 для +1, координата 0 старшая).
    - Координата 0 положительна (i >= half): ортант = count - i
    - Координата 0 отрицательна (i < half):  ортант = half + i + 1

    Args:
        coords: Координаты точки
        max_dims: Верхняя граница размерности

    Returns:
        Номер ортанта (начиная с 1)

    Raises:
        InvalidDimensionError: Если coords пустые или слишком длинные
        OrthantPreconditionError: Если хотя бы одна координата равна 0
            (точка на границе ортантов)

    Examples:
        >>> orthant_of([1.0, 1.0])
        1
        >>> orthant_of([-0.5, -2.0])
        3
    """
    dims = len(coords)
    count = compute_orthant_count(dims, max_dims=max_dims)

    index = 0
    for dim, value in enumerate(coords):
        if math.isnan(value):
            raise OrthantPreconditionError(f"coordinate {dim} is NaN", dims=dims)
        if value == 0:
            raise OrthantPreconditionError(
                f"coordinate {dim} is zero: point lies on an orthant boundary", dims=dims
            )
        index = (index << 1) | (1 if value > 0 else 0)

    half = count // 2
    if index >= half:
        return count - index
    return half + index + 1
