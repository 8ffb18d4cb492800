"""Контроллер генерации: оркестрация холста и сервисов.

SOLID:
- SRP: класс только упорядочивает шаги (сброс холста -> узор -> запись файла),
  без математики узоров и без знания формата файла.
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Один цикл генерации на узор; следующий начинается после записи предыдущего.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ppmgen.models.canvas import Canvas
from ppmgen.models.color import Color
from ppmgen.models.config import PATTERN_NAMES, GeneratorConfig
from ppmgen.models.image_model import GeneratedImage
from ppmgen.services.pattern_service import PatternService
from ppmgen.services.ppm_service import PpmService


@dataclass
class GeneratorController:
    """Прогоняет все узоры через один общий холст.

    Ответственности:
    - Создание холста по размерам из конфигурации.
    - Сброс холста в фон узора перед каждой отрисовкой.
    - Запись результата через `PpmService` и уведомление `on_generated`.
    """
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    on_generated: Optional[Callable[[GeneratedImage], None]] = None

    _pattern_service: PatternService = PatternService()
    _ppm_service: PpmService = PpmService()
    _canvas: Optional[Canvas] = None

    @property
    def canvas(self) -> Canvas:
        if self._canvas is None:
            self._canvas = Canvas(self.config.width, self.config.height)
        return self._canvas

    def run(self) -> List[GeneratedImage]:
        """Генерирует все узоры по порядку. Первая ошибка ввода-вывода прерывает прогон."""
        return [self.generate(name) for name in PATTERN_NAMES]

    def generate(self, name: str) -> GeneratedImage:
        """Один цикл: сброс холста, отрисовка, запись файла.

        Raises:
            KeyError: если имя узора неизвестно.
            PatternDomainError: если геометрия недопустима.
            PpmIOError: если файл не удалось записать.
        """
        canvas = self.canvas
        canvas.fill(self._background_for(name))
        self._pattern_service.paint(name, canvas, self.config)
        image = self._ppm_service.save_ppm(self.config.output_path(name), canvas, pattern=name)
        if self.on_generated is not None:
            self.on_generated(image)
        return image

    # ---- Helpers ----
    def _background_for(self, name: str) -> Color:
        # контур не покрывает холст, фон у него свой
        if name == "hollow_circle":
            return self.config.outline_background
        return self.config.background
