"""Параметры генерации: размеры, геометрия узоров, палитра и пути вывода.

Всё, что раньше было константами, собрано в одну структуру, чтобы тесты
могли менять параметры без правки кода.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ppmgen.models.color import BLACK, GREEN, MAGENTA, Color

PATTERN_NAMES = ("stripes", "checker", "solid_circle", "hollow_circle")


def _default_output_paths() -> Dict[str, Path]:
    return {name: Path(f"{name}.ppm") for name in PATTERN_NAMES}


@dataclass(frozen=True)
class GeneratorConfig:
    """Конфигурация драйвера.

    Fields:
        width: Ширина холста, px.
        height: Высота холста, px.
        tile_size: Размер плитки для полос и шахматки, px.
        radius: Радиус кругов, px. `None` означает `width // 2`.
        background: Фон для полос, шахматки и сплошного круга.
        foreground: Цвет узора.
        outline_background: Фон, которым заливается холст перед контуром круга.
        output_dir: Каталог для файлов.
        output_paths: Имя файла для каждого узора, относительно `output_dir`.
    """
    width: int = 16
    height: int = 16
    tile_size: int = 8
    radius: Optional[int] = None
    background: Color = BLACK
    foreground: Color = MAGENTA
    outline_background: Color = GREEN
    output_dir: Path = Path(".")
    output_paths: Dict[str, Path] = field(default_factory=_default_output_paths)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Размеры должны быть положительными: {self.width}x{self.height}")
        if self.width != self.height:
            # контур круга рисуется только на квадратном холсте
            raise ValueError(f"Холст должен быть квадратным: {self.width}x{self.height}")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size должен быть положительным: {self.tile_size}")
        if self.radius is not None and self.radius <= 0:
            raise ValueError(f"radius должен быть положительным: {self.radius}")
        missing = [name for name in PATTERN_NAMES if name not in self.output_paths]
        if missing:
            raise ValueError(f"Нет пути вывода для узоров: {', '.join(missing)}")

    @property
    def effective_radius(self) -> int:
        return self.radius if self.radius is not None else self.width // 2

    def output_path(self, pattern: str) -> Path:
        return Path(self.output_dir) / self.output_paths[pattern]
