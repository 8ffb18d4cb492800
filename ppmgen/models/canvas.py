"""Холст: прямоугольная сетка цветов фиксированного размера.

Хранение построчное (row-major): пиксель (x, y) лежит по смещению y * width + x.
Внутри это numpy-массив формы (height, width, 3) с dtype uint8.

Политика границ: `get`/`set` проверяют координаты всегда, включая отрицательные,
и бросают `IndexError`. numpy сам по себе принял бы отрицательный индекс
как отсчёт с конца, поэтому проверка явная.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from ppmgen.models.color import Color


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Размеры холста должны быть положительными: {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.zeros((self._height, self._width, 3), dtype=np.uint8)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Canvas":
        """Создаёт холст из массива (height, width, 3). Данные копируются."""
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Ожидался массив формы (height, width, 3), получено {arr.shape}")
        if arr.dtype != np.uint8:
            if not np.issubdtype(arr.dtype, np.integer):
                raise ValueError(f"Ожидались целые значения каналов, получено {arr.dtype}")
            if arr.size and (arr.min() < 0 or arr.max() > 0xFF):
                raise ValueError(f"Значения каналов вне диапазона 0..255: {arr.min()}..{arr.max()}")
        canvas = cls(arr.shape[1], arr.shape[0])
        canvas._pixels[...] = arr.astype(np.uint8)
        return canvas

    # ---- Properties ----
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def pixels(self) -> np.ndarray:
        """Представление пикселей только для чтения."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    # ---- Mutation ----
    def fill(self, color: Color) -> None:
        self._pixels[...] = color.as_tuple()

    def get(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = color.as_tuple()

    def paint_mask(self, mask: np.ndarray, foreground: Color, background: Color) -> None:
        """Записывает foreground там, где маска истинна, и background в остальных пикселях."""
        if mask.shape != (self._height, self._width):
            raise ValueError(f"Форма маски {mask.shape} не совпадает с холстом {(self._height, self._width)}")
        self._pixels[mask] = foreground.as_tuple()
        self._pixels[~mask] = background.as_tuple()

    # ---- Export ----
    def to_bytes(self) -> bytes:
        """RGB-тройки построчно, без выравнивания строк."""
        return self._pixels.tobytes()

    def copy(self) -> "Canvas":
        return Canvas.from_array(self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._pixels, other._pixels))

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Пиксель ({x}, {y}) вне холста {self._width}x{self._height}")
