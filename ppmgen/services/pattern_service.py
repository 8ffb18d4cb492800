from __future__ import annotations

from typing import List, Set, Tuple

import numpy as np

from ppmgen.models.canvas import Canvas
from ppmgen.models.color import Color
from ppmgen.models.config import GeneratorConfig
from ppmgen.services.errors import PatternDomainError


class PatternService:
    # ---------- Вспомогательные функции ----------
    def _grid(self, canvas: Canvas) -> Tuple[np.ndarray, np.ndarray]:
        """
        Возвращает (xs, ys): координаты каждого пикселя, массивы формы (height, width).
        """
        ys, xs = np.indices((canvas.height, canvas.width), dtype=np.int64)
        return xs, ys

    def _require_tile(self, tile_size: int) -> None:
        if tile_size < 1:
            raise PatternDomainError(f"tile_size должен быть >= 1: {tile_size}")

    def _require_radius(self, radius: int) -> None:
        if radius < 1:
            raise PatternDomainError(f"radius должен быть >= 1: {radius}")

    # ---------- 1) Плиточные маски ----------
    def stripes(self, canvas: Canvas, tile_size: int, background: Color, foreground: Color) -> None:
        """
        Диагональные полосы ширины tile_size:
        foreground там, где ((x + y) // tile_size) чётно.
        """
        self._require_tile(tile_size)
        xs, ys = self._grid(canvas)
        mask = ((xs + ys) // tile_size) % 2 == 0
        canvas.paint_mask(mask, foreground, background)

    def checker(self, canvas: Canvas, tile_size: int, background: Color, foreground: Color) -> None:
        """
        Шахматка: foreground там, где (x // tile_size + y // tile_size) чётно.
        Шаг строки равен width, как и в остальных узорах.
        """
        self._require_tile(tile_size)
        xs, ys = self._grid(canvas)
        mask = (xs // tile_size + ys // tile_size) % 2 == 0
        canvas.paint_mask(mask, foreground, background)

    # ---------- 2) Сплошной круг ----------
    def solid_circle(self, canvas: Canvas, radius: int, background: Color, foreground: Color) -> None:
        """
        Диск радиуса radius по центру холста.
        Координаты удвоены (центры пикселей), поэтому центр не смещается
        на полпикселя ни при чётных, ни при нечётных размерах:
            dx = width - 2x - 1, dy = height - 2y - 1, dx² + dy² <= (2r)²
        """
        self._require_radius(radius)
        xs, ys = self._grid(canvas)
        dx = canvas.width - 2 * xs - 1
        dy = canvas.height - 2 * ys - 1
        r2 = 2 * radius
        mask = dx * dx + dy * dy <= r2 * r2
        canvas.paint_mask(mask, foreground, background)

    # ---------- 3) Контур круга (средняя точка, 8 октантов) ----------
    def trace_octant(self, radius: int) -> List[Tuple[int, int]]:
        """
        Один октант окружности от (0, r) до диагонали x == y, целочисленно.
        После каждой точки x растёт на 1; если точка вышла за окружность
        (x² + y² > r²), y уменьшается на 1.
        """
        self._require_radius(radius)
        points: List[Tuple[int, int]] = []
        x, y = 0, radius
        while x <= y:
            points.append((x, y))
            x += 1
            if x * x + y * y > radius * radius:
                y -= 1
        return points

    def outline_offsets(self, radius: int) -> Set[Tuple[int, int]]:
        """
        Точки контура относительно центра: октант, отражённый во все 8 октантов.
        """
        offsets: Set[Tuple[int, int]] = set()
        for x, y in self.trace_octant(radius):
            for sx, sy in ((x, y), (y, x)):
                offsets.update({(sx, sy), (-sx, sy), (sx, -sy), (-sx, -sy)})
        return offsets

    def hollow_circle(self, canvas: Canvas, radius: int, color: Color) -> None:
        """
        Контур круга толщиной 1 px по центру (width // 2, height // 2).
        Остальные пиксели не трогает: холст нужно залить фоном заранее.
        Отрицательные отражения считаются как width - p / height - p.
        Точки за пределами холста пропускаются (при radius >= width / 2
        крайние точки попадают ровно на width).
        """
        w, h = canvas.width, canvas.height
        if w != h:
            raise PatternDomainError(f"Контур круга требует квадратный холст, получено {w}x{h}")
        cx, cy = w // 2, h // 2
        for x, y in self.trace_octant(radius):
            px, py = x + cx, y + cy
            for col, row in (
                (px, py), (py, px),
                (px, h - py), (h - py, px),
                (w - px, py), (py, w - px),
                (h - py, w - px), (w - px, h - py),
            ):
                if 0 <= col < w and 0 <= row < h:
                    canvas.set(col, row, color)

    # ---------- Диспетчер ----------
    def paint(self, name: str, canvas: Canvas, config: GeneratorConfig) -> None:
        """
        Рисует узор по имени с параметрами из конфигурации.

        Raises:
            KeyError: если имя узора неизвестно.
        """
        if name == "stripes":
            self.stripes(canvas, config.tile_size, config.background, config.foreground)
        elif name == "checker":
            self.checker(canvas, config.tile_size, config.background, config.foreground)
        elif name == "solid_circle":
            self.solid_circle(canvas, config.effective_radius, config.background, config.foreground)
        elif name == "hollow_circle":
            self.hollow_circle(canvas, config.effective_radius, config.foreground)
        else:
            raise KeyError(f"Неизвестный узор: {name}")
