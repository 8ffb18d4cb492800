"""Исключения сервисов."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class PatternDomainError(ValueError):
    """Недопустимая геометрия узора: нулевая плитка, нулевой радиус, неквадратный холст."""


class PpmIOError(OSError):
    """Файл не удалось открыть, записать или закрыть.

    Attributes:
        path: Путь к файлу.
        reason: Текст ошибки ОС.
        action: Операция, на которой произошёл сбой: "открыть" или "записать".
    """

    def __init__(self, path: Path, reason: Optional[str], action: str = "записать") -> None:
        self.path = Path(path)
        self.reason = reason or "неизвестная ошибка"
        self.action = action
        super().__init__(f"Не удалось {self.action} файл {self.path}: {self.reason}")
