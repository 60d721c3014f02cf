"""
Orthants: мемоизированная нумерация ортантов n-мерного пространства.

- Подсчёт ортантов: 2^dims (0 < dims < 31)
- Знаки ортанта по номеру (каноническая нумерация, начиная с 1)
- Обратный поиск номера ортанта по точке
"""

from .service import (
    OrthantService,
    OrthantsConfig,
    get_default_service,
    orthant_count,
    orthant_sign,
)

__all__ = [
    "OrthantService",
    "OrthantsConfig",
    "get_default_service",
    "orthant_count",
    "orthant_sign",
]
