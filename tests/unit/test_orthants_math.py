"""
Тесты для Orthants: чистые алгоритмы нумерации ортантов

Проверяемые инварианты:
1. count(dims) = 2^dims для dims в [1, 30]
2. Нумерация: биекция между 1..2^dims и всеми ±1 последовательностями
3. Документированные примеры (2D): ортант 1 = [1, 1], ортант 3 = [-1, -1]
4. Нарушение предусловий → OrthantPreconditionError
5. orthant_of: обратная операция к нумерации
"""

import itertools

import pytest

from src.core.math.combinations import count_combinations, list_combinations
from src.core.math.orthants import (
    MAX_COUNT_DIMS,
    SIGN_CHOICES,
    InvalidDimensionError,
    OrthantOutOfRangeError,
    OrthantPreconditionError,
    compute_orthant_count,
    generate_sign_patterns,
    orthant_of,
    validate_dims,
    validate_orthant,
)


# =============================================================================
# ТЕСТЫ: Combinations
# =============================================================================


class TestListCombinations:
    """Тесты list_combinations: выбор по одному элементу из каждого набора."""

    def test_two_sign_sets(self):
        """Два набора {-1, 1} дают 4 комбинации в порядке одометра."""
        assert list_combinations([[-1, 1], [-1, 1]]) == [[-1, -1], [-1, 1], [1, -1], [1, 1]]

    def test_heterogeneous_sets(self):
        """Наборы разного размера и типа."""
        result = list_combinations([["a", "b"], [1, 2, 3]])
        assert len(result) == 6
        assert result[0] == ["a", 1]
        assert result[-1] == ["b", 3]

    def test_empty_sequence_of_sets(self):
        """Нет наборов → одна пустая комбинация."""
        assert list_combinations([]) == [[]]

    def test_empty_choice_set(self):
        """Пустой набор → нет комбинаций."""
        assert list_combinations([[1, 2], []]) == []

    def test_count_matches_materialized(self):
        """count_combinations совпадает с длиной list_combinations."""
        sets = [[1, 2], [1, 2, 3], [1]]
        assert count_combinations(sets) == len(list_combinations(sets)) == 6
        assert count_combinations([]) == 1


# =============================================================================
# ТЕСТЫ: Orthant Count
# =============================================================================


class TestComputeOrthantCount:
    """Тесты compute_orthant_count."""

    @pytest.mark.parametrize("dims", range(1, MAX_COUNT_DIMS + 1))
    def test_power_of_two(self, dims):
        """count = 2^dims для всех допустимых dims."""
        assert compute_orthant_count(dims) == 2 ** dims

    def test_max_count_fits_int32(self):
        """Максимальный count помещается в signed int32."""
        assert compute_orthant_count(MAX_COUNT_DIMS) <= 2 ** 31 - 1

    @pytest.mark.parametrize("dims", [0, -1, -30, 31, 64])
    def test_invalid_dims_rejected(self, dims):
        """dims <= 0 или dims >= 31 → InvalidDimensionError."""
        with pytest.raises(InvalidDimensionError) as exc_info:
            compute_orthant_count(dims)
        assert exc_info.value.dims == dims

    @pytest.mark.parametrize("dims", [2.0, "2", None, True])
    def test_non_integer_dims_rejected(self, dims):
        """Нецелые dims (включая bool) отвергаются."""
        with pytest.raises(InvalidDimensionError, match="integer"):
            compute_orthant_count(dims)

    def test_custom_max_dims(self):
        """max_dims ужесточает верхнюю границу, но не ослабляет её."""
        assert compute_orthant_count(4, max_dims=4) == 16
        with pytest.raises(InvalidDimensionError):
            compute_orthant_count(5, max_dims=4)
        with pytest.raises(InvalidDimensionError):
            compute_orthant_count(31, max_dims=40)

    def test_precondition_errors_are_value_errors(self):
        """Иерархия исключений: все OrthantPreconditionError / ValueError."""
        assert issubclass(InvalidDimensionError, OrthantPreconditionError)
        assert issubclass(OrthantOutOfRangeError, OrthantPreconditionError)
        assert issubclass(OrthantPreconditionError, ValueError)


# =============================================================================
# ТЕСТЫ: Sign Pattern Ordering
# =============================================================================


class TestGenerateSignPatterns:
    """Тесты канонической нумерации ортантов."""

    def test_documented_2d_examples(self):
        """2D: ортант 1 = [1, 1], ортант 3 = [-1, -1]."""
        patterns = generate_sign_patterns(2)
        assert patterns[0] == (1, 1)
        assert patterns[2] == (-1, -1)

    def test_full_2d_order(self):
        """2D: полный порядок нумерации."""
        assert generate_sign_patterns(2) == [(1, 1), (1, -1), (-1, -1), (-1, 1)]

    def test_1d_order(self):
        """1D: ортант 1 положительный, ортант 2 отрицательный."""
        assert generate_sign_patterns(1) == [(1,), (-1,)]

    def test_full_3d_order(self):
        """3D: reverse(S)[:4] ++ S[:4]."""
        assert generate_sign_patterns(3) == [
            (1, 1, 1),
            (1, 1, -1),
            (1, -1, 1),
            (1, -1, -1),
            (-1, -1, -1),
            (-1, -1, 1),
            (-1, 1, -1),
            (-1, 1, 1),
        ]

    @pytest.mark.parametrize("dims", range(1, 11))
    def test_bijection(self, dims):
        """Все ±1 последовательности длины dims, без дубликатов и пропусков."""
        patterns = generate_sign_patterns(dims)
        expected = set(itertools.product(SIGN_CHOICES, repeat=dims))
        assert len(patterns) == 2 ** dims
        assert len(set(patterns)) == len(patterns)
        assert set(patterns) == expected

    @pytest.mark.parametrize("dims", range(1, 8))
    def test_first_orthant_all_positive(self, dims):
        """Ортант 1 всегда [1, ..., 1]."""
        assert generate_sign_patterns(dims)[0] == (1,) * dims

    def test_explicit_count_reused(self):
        """Переданный count используется без повторного вычисления."""
        assert generate_sign_patterns(2, count=4) == generate_sign_patterns(2)

    def test_invalid_dims(self):
        """Некорректный dims → InvalidDimensionError."""
        with pytest.raises(InvalidDimensionError):
            generate_sign_patterns(0)
        with pytest.raises(InvalidDimensionError):
            generate_sign_patterns(31)

    @pytest.mark.parametrize("dims,count", [(3, 4), (2, 8), (2, 0), (1, True)])
    def test_count_mismatch_rejected(self, dims, count):
        """count != 2^dims → OrthantPreconditionError (никаких частичных данных)."""
        with pytest.raises(OrthantPreconditionError, match="does not match"):
            generate_sign_patterns(dims, count=count)

    @pytest.mark.parametrize("dims,count", [(-1, 4), (0, 1), (31, 2 ** 31)])
    def test_invalid_dims_with_count(self, dims, count):
        """Переданный count не отменяет валидацию dims."""
        with pytest.raises(InvalidDimensionError):
            generate_sign_patterns(dims, count=count)

    def test_max_dims_message_states_bound(self):
        """Сообщение об ошибке называет заданную границу."""
        with pytest.raises(InvalidDimensionError, match="dims must be <= 4, got 5"):
            generate_sign_patterns(5, max_dims=4)


# =============================================================================
# ТЕСТЫ: Validation
# =============================================================================


class TestValidateOrthant:
    """Тесты validate_orthant."""

    @pytest.mark.parametrize("orthant", [1, 2, 3, 4])
    def test_valid_range(self, orthant):
        validate_orthant(2, orthant, 4)

    @pytest.mark.parametrize("orthant", [0, 5, -1, 100])
    def test_out_of_range(self, orthant):
        """orthant вне [1, count] → OrthantOutOfRangeError с контекстом."""
        with pytest.raises(OrthantOutOfRangeError, match=r"out of range \[1, 4\]") as exc_info:
            validate_orthant(2, orthant, 4)
        assert exc_info.value.dims == 2
        assert exc_info.value.orthant == orthant

    def test_non_integer_orthant(self):
        with pytest.raises(OrthantOutOfRangeError, match="integer"):
            validate_orthant(2, 1.0, 4)

    def test_validate_dims_unbounded(self):
        """max_dims=None снимает верхнюю границу."""
        validate_dims(64, max_dims=None)
        with pytest.raises(InvalidDimensionError):
            validate_dims(0, max_dims=None)


# =============================================================================
# ТЕСТЫ: Inverse Lookup
# =============================================================================


class TestOrthantOf:
    """Тесты orthant_of: номер ортанта по координатам."""

    def test_documented_2d_examples(self):
        assert orthant_of([1.0, 1.0]) == 1
        assert orthant_of([-1.0, -1.0]) == 3

    def test_magnitude_irrelevant(self):
        """Важен только знак координат."""
        assert orthant_of([0.001, -250.0]) == 2
        assert orthant_of([-3.5, 7.0]) == 4

    @pytest.mark.parametrize("dims", range(1, 9))
    def test_inverse_of_generation(self, dims):
        """orthant_of(patterns[k - 1]) == k для всех k."""
        for index, signs in enumerate(generate_sign_patterns(dims)):
            assert orthant_of(signs) == index + 1

    def test_zero_coordinate_rejected(self):
        """Точка на границе ортантов → OrthantPreconditionError."""
        with pytest.raises(OrthantPreconditionError, match="boundary"):
            orthant_of([1.0, 0.0])

    def test_nan_coordinate_rejected(self):
        with pytest.raises(OrthantPreconditionError, match="NaN"):
            orthant_of([float("nan"), 1.0])

    def test_empty_coords_rejected(self):
        with pytest.raises(InvalidDimensionError):
            orthant_of([])
