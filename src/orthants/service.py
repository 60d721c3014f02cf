"""
OrthantService - мемоизированный доступ к нумерации ортантов.

Два независимых write-once кэша:
- orthant_count_cache: dims → 2^dims
- orthant_sign_cache: (dims, orthant) → Point со знаками ±1.0

Поток вызова orthant_sign(dims, orthant):
1. Валидация dims и orthant (ДО обращения к кэшу знаков)
2. Cache hit → немедленный возврат
3. Cache miss → генерация ВСЕЙ упорядоченной последовательности для dims,
   выбор элемента orthant - 1, обёртка в Point, запись в кэш

Конкурентность: вызовы синхронные, CPU-bound. Два потока с одним ключом
могут оба вычислить значение, сохраняется первое (first writer wins).

Контракты (contracts/schema) загружаются только при validate_contracts=True.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from src.core.cache.memo_cache import CacheStats, MemoCache
from src.core.domain.point import Point
from src.core.math.orthants import (
    MAX_COUNT_DIMS,
    compute_orthant_count,
    generate_sign_patterns,
    orthant_of,
    validate_dims,
    validate_orthant,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrthantsConfig:
    """Конфигурация OrthantService.

    - max_dims: верхняя граница размерности (не больше MAX_COUNT_DIMS = 30)
    - validate_contracts: проверять каждую новую точку знаков по
      contracts/schema/point.json перед записью в кэш
    """
    max_dims: int = MAX_COUNT_DIMS
    validate_contracts: bool = False

    def __post_init__(self):
        if isinstance(self.max_dims, bool) or not isinstance(self.max_dims, int):
            raise ValueError(f"max_dims must be an integer, got {self.max_dims!r}")
        if not 1 <= self.max_dims <= MAX_COUNT_DIMS:
            raise ValueError(f"max_dims must be in [1, {MAX_COUNT_DIMS}], got {self.max_dims}")


class OrthantService:
    """Подсчёт ортантов и поиск их знаков с мемоизацией.

    Кэши инжектируются: тесты создают изолированные экземпляры и
    проверяют поведение кэша без взаимного влияния.
    """

    def __init__(
        self,
        config: Optional[OrthantsConfig] = None,
        count_cache: Optional[MemoCache[int, int]] = None,
        sign_cache: Optional[MemoCache[Tuple[int, int], Point]] = None
    ):
        """
        Args:
            config: конфигурация сервиса (default OrthantsConfig())
            count_cache: кэш dims → count (default новый MemoCache)
            sign_cache: кэш (dims, orthant) → Point (default новый MemoCache)
        """
        self.config = config or OrthantsConfig()
        self.orthant_count_cache = count_cache if count_cache is not None else MemoCache("orthant_count")
        self.orthant_sign_cache = sign_cache if sign_cache is not None else MemoCache("orthant_sign")

    def orthant_count(self, dims: int) -> int:
        """Количество ортантов в пространстве размерности dims.

        Raises:
            InvalidDimensionError: dims <= 0, не int или dims > max_dims
        """
        validate_dims(dims, max_dims=self.config.max_dims)
        return self.orthant_count_cache.get_if_absent_put(
            dims,
            lambda: compute_orthant_count(dims, max_dims=self.config.max_dims)
        )

    def orthant_sign(self, dims: int, orthant: int) -> Point:
        """Знаки координат в заданном ортанте.

        Пример (2D):
        - знаки в ортанте 1 = [1, 1]
        - знаки в ортанте 3 = [-1, -1]

        Args:
            dims: количество измерений пространства
            orthant: номер ортанта (начиная с 1)

        Returns:
            Point с координатами +1.0 / -1.0

        Raises:
            InvalidDimensionError: некорректный dims
            OrthantOutOfRangeError: orthant вне [1, orthant_count(dims)]
        """
        count = self.orthant_count(dims)
        validate_orthant(dims, orthant, count)
        return self.orthant_sign_cache.get_if_absent_put(
            (dims, orthant),
            lambda: self._compute_sign(dims, orthant, count)
        )

    def all_orthant_signs(self, dims: int) -> list[Point]:
        """Знаки всех ортантов в порядке нумерации (ортант 1 первый).

        Последовательность генерируется не более одного раза за вызов;
        уже закэшированные точки переиспользуются.
        """
        count = self.orthant_count(dims)
        patterns = None
        points = []
        for orthant in range(1, count + 1):
            key = (dims, orthant)
            point = self.orthant_sign_cache.get(key)
            if point is None:
                if patterns is None:
                    patterns = generate_sign_patterns(dims, count=count)
                signs = patterns[orthant - 1]
                point = self.orthant_sign_cache.get_if_absent_put(
                    key, lambda signs=signs: self._to_point(signs)
                )
            points.append(point)
        return points

    def orthant_of(self, point: Union[Point, Sequence[float]]) -> int:
        """Номер ортанта, содержащего точку (обратно к orthant_sign).

        Raises:
            InvalidDimensionError: размерность точки вне [1, max_dims]
            OrthantPreconditionError: точка лежит на границе (координата 0)
        """
        coords = point.coords if isinstance(point, Point) else point
        return orthant_of(coords, max_dims=self.config.max_dims)

    def describe(self, dims: int, orthant: int) -> Dict[str, Any]:
        """Результат поиска знаков в форме контракта orthant_sign."""
        data = {
            "dims": dims,
            "orthant": orthant,
            "orthant_count": self.orthant_count(dims),
            "signs": self.orthant_sign(dims, orthant).to_dict(),
        }
        if self.config.validate_contracts:
            from src.core.contracts.validators import validate_orthant_sign

            validate_orthant_sign(data)
        return data

    def cache_stats(self) -> Dict[str, CacheStats]:
        """Счётчики обоих кэшей (для диагностики и тестов)."""
        return {
            "orthant_count": self.orthant_count_cache.stats(),
            "orthant_sign": self.orthant_sign_cache.stats(),
        }

    def clear_caches(self) -> None:
        self.orthant_count_cache.clear()
        self.orthant_sign_cache.clear()

    def _compute_sign(self, dims: int, orthant: int, count: int) -> Point:
        logger.debug("orthant_sign cache miss: dims=%d orthant=%d", dims, orthant)
        patterns = generate_sign_patterns(dims, count=count)
        return self._to_point(patterns[orthant - 1])

    def _to_point(self, signs: Sequence[int]) -> Point:
        point = Point(coords=[float(s) for s in signs])
        if self.config.validate_contracts:
            from src.core.contracts.validators import validate_point

            validate_point(point.to_dict())
        return point


# =============================================================================
# DEFAULT SERVICE
# =============================================================================

_DEFAULT_SERVICE: Optional[OrthantService] = None
_DEFAULT_SERVICE_LOCK = threading.Lock()


def get_default_service() -> OrthantService:
    """Общий экземпляр сервиса для module-level функций (создаётся лениво)."""
    global _DEFAULT_SERVICE
    with _DEFAULT_SERVICE_LOCK:
        if _DEFAULT_SERVICE is None:
            _DEFAULT_SERVICE = OrthantService()
        return _DEFAULT_SERVICE


def orthant_count(dims: int) -> int:
    """Количество ортантов через общий сервис (см. OrthantService.orthant_count)."""
    return get_default_service().orthant_count(dims)


def orthant_sign(dims: int, orthant: int) -> Point:
    """Знаки ортанта через общий сервис (см. OrthantService.orthant_sign)."""
    return get_default_service().orthant_sign(dims, orthant)
