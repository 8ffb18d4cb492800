"""Точка входа в приложение."""
from __future__ import annotations

import sys
from typing import Optional

from ppmgen.controllers.generator_controller import GeneratorController
from ppmgen.models.config import GeneratorConfig
from ppmgen.models.image_model import GeneratedImage
from ppmgen.services.errors import PpmIOError


def _report(image: GeneratedImage) -> None:
    print(f"Generated {image.path}")


def main(config: Optional[GeneratorConfig] = None) -> int:
    """Генерирует все узоры и возвращает код выхода процесса."""
    controller = GeneratorController(config=config or GeneratorConfig(), on_generated=_report)
    try:
        controller.run()
    except PpmIOError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
