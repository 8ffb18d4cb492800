"""Модели данных для сгенерированных изображений.

Принципы:
- SRP: только структура данных, без логики генерации или записи.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratedImage:
    """Неизменяемая запись о записанном PPM-файле.

    Fields:
        pattern: Имя узора, например "stripes".
        path: Путь к файлу.
        width: Ширина, px.
        height: Высота, px.
        size_bytes: Размер файла: заголовок плюс 3 * width * height.
    """
    pattern: str
    path: Path
    width: int
    height: int
    size_bytes: int
