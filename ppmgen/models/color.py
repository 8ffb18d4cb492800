"""Цветовая модель: 8-битные RGB-каналы и упакованное 24-битное представление.

Принципы:
- SRP: только значение цвета и преобразования pack/unpack.
- Неизменяемость (`frozen=True`): цвет не имеет идентичности, кроме значений каналов.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """Цвет из трёх 8-битных каналов, без альфа-канала.

    Fields:
        red: Красный канал, 0..255.
        green: Зелёный канал, 0..255.
        blue: Синий канал, 0..255.
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name, value in (("red", self.red), ("green", self.green), ("blue", self.blue)):
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"Канал {name} вне диапазона 0..255: {value!r}")

    @classmethod
    def from_packed(cls, value: int) -> "Color":
        """Раскладывает упакованное 0xRRGGBB на каналы.

        Raises:
            ValueError: если значение не помещается в 24 бита.
        """
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"Упакованный цвет вне диапазона 0..0xFFFFFF: {value!r}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_packed(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


# Фиксированная палитра
BLACK = Color.from_packed(0x000000)
MAGENTA = Color.from_packed(0xFF00FF)
GREEN = Color.from_packed(0x00FF00)
