import errno

import numpy as np
import pytest
from PIL import Image

from ppmgen.models.canvas import Canvas
from ppmgen.models.color import BLACK, MAGENTA
from ppmgen.services import ppm_service as ppm_module
from ppmgen.services.errors import PpmIOError


def _parse_p6(data):
    magic, dims, maxval, body = data.split(b"\n", 3)
    width, height = (int(v) for v in dims.split(b" "))
    return magic, width, height, int(maxval), body


def test_header_is_exact(ppm_service):
    assert ppm_service.header(16, 16) == b"P6\n16 16\n255\n"
    assert len(ppm_service.header(16, 16)) == 13


def test_encode_layout(ppm_service, gradient_canvas):
    data = ppm_service.encode(gradient_canvas)
    magic, width, height, maxval, body = _parse_p6(data)
    assert (magic, width, height, maxval) == (b"P6", 7, 5, 255)
    assert len(body) == 3 * 7 * 5


def test_bytes_parse_back_to_same_canvas(ppm_service, gradient_canvas):
    _, width, height, _, body = _parse_p6(ppm_service.encode(gradient_canvas))
    pixels = np.frombuffer(body, dtype=np.uint8).reshape((height, width, 3))
    assert Canvas.from_array(pixels) == gradient_canvas


def test_saved_file_reads_back_with_pillow(ppm_service, gradient_canvas, tmp_path):
    path = tmp_path / "gradient.ppm"
    image = ppm_service.save_ppm(path, gradient_canvas)
    assert image.path == path
    assert image.pattern == "gradient"
    assert (image.width, image.height) == (7, 5)
    assert image.size_bytes == path.stat().st_size

    with Image.open(path) as img:
        assert img.format == "PPM"
        assert img.size == (7, 5)
        assert img.getpixel((3, 2)) == gradient_canvas.get(3, 2).as_tuple()

    assert ppm_service.load_ppm(path) == gradient_canvas


def test_stripes_16x16_end_to_end(ppm_service, pattern_service, tmp_path):
    canvas = Canvas(16, 16)
    pattern_service.stripes(canvas, 8, BLACK, MAGENTA)
    path = tmp_path / "stripes.ppm"
    ppm_service.save_ppm(path, canvas, pattern="stripes")

    data = path.read_bytes()
    assert len(data) == 13 + 3 * 256
    assert data[:13] == b"P6\n16 16\n255\n"
    body = data[13:]
    for y in range(16):
        for x in range(16):
            offset = 3 * (y * 16 + x)
            expected = MAGENTA if ((x + y) // 8) % 2 == 0 else BLACK
            assert tuple(body[offset:offset + 3]) == expected.as_tuple()


def test_save_overwrites_existing_file(ppm_service, tmp_path):
    path = tmp_path / "out.ppm"
    path.write_bytes(b"x" * 10000)
    image = ppm_service.save_ppm(path, Canvas(2, 2))
    assert path.stat().st_size == image.size_bytes == len(b"P6\n2 2\n255\n") + 12


def test_save_into_missing_directory_raises(ppm_service, tmp_path):
    path = tmp_path / "missing" / "out.ppm"
    with pytest.raises(PpmIOError) as excinfo:
        ppm_service.save_ppm(path, Canvas(2, 2))
    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)
    assert excinfo.value.action == "открыть"
    assert "Не удалось открыть файл" in str(excinfo.value)
    assert isinstance(excinfo.value, OSError)
    assert not path.exists()


class _FailingWriter:
    def __init__(self, handle):
        self._handle = handle

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._handle.close()
        return False

    def write(self, data):
        self._handle.write(data[:5])
        raise OSError(errno.ENOSPC, "No space left on device")


def test_failed_write_removes_partial_file(ppm_service, tmp_path, monkeypatch):
    real_open = open
    monkeypatch.setattr(
        ppm_module, "open", lambda path, mode: _FailingWriter(real_open(path, mode)), raising=False
    )
    path = tmp_path / "partial.ppm"
    with pytest.raises(PpmIOError) as excinfo:
        ppm_service.save_ppm(path, Canvas(4, 4))
    assert excinfo.value.reason == "No space left on device"
    assert excinfo.value.action == "записать"
    assert not path.exists()


def test_load_missing_file_raises(ppm_service, tmp_path):
    with pytest.raises(FileNotFoundError):
        ppm_service.load_ppm(tmp_path / "nope.ppm")


def test_load_non_image_raises(ppm_service, tmp_path):
    path = tmp_path / "junk.ppm"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(ValueError):
        ppm_service.load_ppm(path)


def test_load_truncated_body_raises_value_error(ppm_service, tmp_path):
    path = tmp_path / "short.ppm"
    path.write_bytes(b"P6\n4 4\n255\n" + b"\x00" * 10)
    with pytest.raises(ValueError):
        ppm_service.load_ppm(path)
