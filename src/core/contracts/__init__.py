"""
Contract Validation Module

Модуль для валидации JSON контрактов (contracts/schema/).
"""

from .validators import (
    ContractValidator,
    OrthantSignValidator,
    PointValidator,
    SchemaLoader,
    validate_orthant_sign,
    validate_point,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PointValidator",
    "OrthantSignValidator",
    # Functions
    "validate_point",
    "validate_orthant_sign",
]
