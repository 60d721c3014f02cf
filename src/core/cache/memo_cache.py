"""
MemoCache - потокобезопасный write-once кэш для чистых вычислений

Семантика get_if_absent_put:
- Если ключ уже в кэше → возвращается закэшированное значение
- Иначе factory() вызывается ВНЕ блокировки, результат вставляется только
  если ключ всё ещё отсутствует (first writer wins)
- Конкурентные вызовы с одним ключом могут оба вычислить значение, но все
  получат одно и то же сохранённое значение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Однажды записанное значение никогда не меняется (нет eviction/invalidation)
2. Исключение в factory() не оставляет записи в кэше
3. Никто не ждёт чужого in-flight вычисления (lock только на доступ к dict)
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class CacheStats:
    """Снапшот счётчиков кэша."""

    hits: int
    misses: int
    size: int


class MemoCache(Generic[K, V]):
    """
    Write-once кэш ключ → значение.

    Явный инжектируемый объект: каждый сервис (и каждый тест) владеет
    своими экземплярами, глобального состояния нет.
    """

    def __init__(self, name: str = "memo"):
        """
        Args:
            name: Имя кэша (для диагностики)
        """
        self.name = name
        self._entries: Dict[K, V] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_if_absent_put(self, key: K, factory: Callable[[], V]) -> V:
        """
        Получение значения из кэша или вычисление и вставка.

        Args:
            key: Ключ
            factory: Чистая функция без аргументов, вычисляющая значение

        Returns:
            Значение, сохранённое в кэше для key

        Raises:
            Любое исключение factory() (запись в кэш не производится)
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                return self._entries[key]
            self._misses += 1

        value = factory()

        with self._lock:
            # first writer wins
            return self._entries.setdefault(key, value)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Чтение без вычисления (счётчики не меняются)."""
        with self._lock:
            return self._entries.get(key, default)

    def clear(self) -> None:
        """Полная очистка кэша и счётчиков."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(hits=self._hits, misses=self._misses, size=len(self._entries))

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoCache(name={self.name!r}, size={len(self)})"
