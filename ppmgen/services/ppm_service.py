"""Запись холста в бинарный PPM (P6) и чтение обратно.

Принципы:
- SRP: класс отвечает только за формат файла и файловый ввод-вывод.
- Заголовок `P6\\n<width> <height>\\n255\\n`, затем ровно 3 * width * height байт
  RGB построчно, без выравнивания. Читатели P6 полагаются на размеры
  из заголовка, поэтому они обязаны совпадать с холстом.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from ppmgen.models.canvas import Canvas
from ppmgen.models.image_model import GeneratedImage
from ppmgen.services.errors import PpmIOError

MAX_CHANNEL_VALUE = 255


class PpmService:
    def header(self, width: int, height: int) -> bytes:
        return f"P6\n{width} {height}\n{MAX_CHANNEL_VALUE}\n".encode("ascii")

    def encode(self, canvas: Canvas) -> bytes:
        """Кодирует холст в байты PPM P6: заголовок и RGB-тройки."""
        return self.header(canvas.width, canvas.height) + canvas.to_bytes()

    def save_ppm(self, file_path: str | Path, canvas: Canvas, pattern: Optional[str] = None) -> GeneratedImage:
        """Записывает холст в файл, создавая или перезаписывая его.

        Args:
            file_path: Путь до выходного файла.
            canvas: Холст для записи.
            pattern: Имя узора для метаданных; по умолчанию имя файла без расширения.

        Returns:
            `GeneratedImage` с путём, размерами и размером файла.

        Raises:
            PpmIOError: если файл не удалось открыть, записать или закрыть.
                Недописанный файл удаляется.
        """
        path = Path(file_path)
        payload = self.encode(canvas)

        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise PpmIOError(path, exc.strerror or str(exc), action="открыть") from exc

        try:
            with handle:
                handle.write(payload)
        except OSError as exc:
            self._discard(path)
            raise PpmIOError(path, exc.strerror or str(exc)) from exc

        return GeneratedImage(
            pattern=pattern if pattern is not None else path.stem,
            path=path,
            width=canvas.width,
            height=canvas.height,
            size_bytes=len(payload),
        )

    def load_ppm(self, file_path: str | Path) -> Canvas:
        """Загружает PPM с диска и возвращает его как холст.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение или обрезан.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as pil_image:
                rgb = pil_image.convert("RGB")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc
        except OSError as exc:
            # обрезанное тело: данных меньше, чем обещает заголовок
            raise ValueError(f"Файл повреждён: {path}: {exc}") from exc

        return Canvas.from_array(np.asarray(rgb, dtype=np.uint8))

    def _discard(self, path: Path) -> None:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
