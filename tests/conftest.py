import pytest

from ppmgen.models.canvas import Canvas
from ppmgen.models.color import Color
from ppmgen.services.pattern_service import PatternService
from ppmgen.services.ppm_service import PpmService


@pytest.fixture
def pattern_service():
    return PatternService()


@pytest.fixture
def ppm_service():
    return PpmService()


@pytest.fixture
def gradient_canvas():
    """
    Deterministic 7x5 canvas where every pixel has a distinct colour.
    Non-square on purpose, to catch width/height mixups.
    """
    canvas = Canvas(7, 5)
    for y in range(canvas.height):
        for x in range(canvas.width):
            canvas.set(x, y, Color((x * 37) % 256, (y * 53) % 256, (x * 13 + y * 19) % 256))
    return canvas
