"""
Point - Точка в n-мерном метрическом пространстве

Immutable Pydantic модель: упорядоченная последовательность вещественных
координат фиксированной длины.

Семантика:
- Равенство: совпадение размерности и КАЖДОЙ координаты точно (без epsilon)
- hash согласован с равенством (frozen=True)
- Координаты хранятся как tuple: изменение исходного списка после
  конструирования не влияет на точку
"""

import math
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class Point(BaseModel):
    """
    Точка в n-мерном пространстве.

    Immutable модель (frozen=True). Для "изменения" координат создаётся
    новый экземпляр.
    """

    coords: tuple[float, ...] = Field(
        ..., min_length=1, description="Координаты по каждому измерению (dim 0 первое)"
    )

    model_config = {"frozen": True}

    @field_validator("coords", mode="before")
    @classmethod
    def validate_real_numbers(cls, v: Any) -> Any:
        """Координаты только int/float: строки и bool не приводятся к числам."""
        if isinstance(v, (str, bytes)):
            raise ValueError(f"coords must be a sequence of numbers, got {type(v).__name__}")
        try:
            items = list(v)
        except TypeError:
            return v
        for dim, value in enumerate(items):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(
                    f"coordinate {dim} must be a real number, got {type(value).__name__}"
                )
        return items

    @field_validator("coords")
    @classmethod
    def validate_finite(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Координаты должны быть конечными числами (не NaN/Inf)."""
        for dim, value in enumerate(v):
            if not math.isfinite(value):
                raise ValueError(f"coordinate {dim} must be finite (not NaN/Inf), got {value}")
        return tuple(float(value) for value in v)

    @classmethod
    def of(cls, *coords: float) -> "Point":
        """
        Создание точки из позиционных координат.

        Examples:
            >>> Point.of(1.0, -1.0).dims
            2
        """
        return cls(coords=coords)

    @property
    def dims(self) -> int:
        """Количество измерений."""
        return len(self.coords)

    def coord(self, dim: int) -> float:
        """
        Значение координаты в заданном измерении.

        Args:
            dim: Номер измерения (первое измерение = 0)

        Returns:
            Значение координаты

        Raises:
            IndexError: Если dim вне [0, dims)
        """
        if not 0 <= dim < self.dims:
            raise IndexError(f"dim {dim} out of range for {self.dims}-dimensional point")
        return self.coords[dim]

    def __len__(self) -> int:
        return self.dims

    def __str__(self) -> str:
        return "Point[" + ", ".join(repr(c) for c in self.coords) + "]"

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в форму контракта point (contracts/schema/point.json)."""
        return {"dims": self.dims, "coords": list(self.coords)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """
        Десериализация из формы контракта point.

        Raises:
            ValueError: Если dims не совпадает с количеством координат
        """
        coords = data["coords"]
        if data.get("dims", len(coords)) != len(coords):
            raise ValueError(
                f"dims {data['dims']} does not match number of coords {len(coords)}"
            )
        return cls(coords=coords)
