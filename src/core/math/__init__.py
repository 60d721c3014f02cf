"""
Core math modules

Чистые комбинаторные алгоритмы: выбор по одному элементу из каждого набора
и каноническая нумерация ортантов.
"""

# Combinations
from src.core.math.combinations import (
    count_combinations,
    list_combinations,
)

# Orthants
from src.core.math.orthants import (
    MAX_COUNT_DIMS,
    SIGN_CHOICES,
    SIGN_NEGATIVE,
    SIGN_POSITIVE,
    InvalidDimensionError,
    OrthantOutOfRangeError,
    OrthantPreconditionError,
    compute_orthant_count,
    generate_sign_patterns,
    orthant_of,
    validate_dims,
    validate_orthant,
)

__all__ = [
    # Combinations
    "count_combinations",
    "list_combinations",
    # Orthants: Constants
    "MAX_COUNT_DIMS",
    "SIGN_CHOICES",
    "SIGN_NEGATIVE",
    "SIGN_POSITIVE",
    # Orthants: Exceptions
    "InvalidDimensionError",
    "OrthantOutOfRangeError",
    "OrthantPreconditionError",
    # Orthants: Functions
    "compute_orthant_count",
    "generate_sign_patterns",
    "orthant_of",
    "validate_dims",
    "validate_orthant",
]
