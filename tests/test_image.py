import pytest
from PIL import Image as PILImage

from ironcat.image import Image, ImageDataFormat, ImageInternalFormat


def _save(tmp_path, mode, size, pixels, name="img.png"):
    img = PILImage.new(mode, size)
    img.putdata(pixels)
    path = tmp_path / name
    img.save(path)
    return path


def test_rgb_image(tmp_path):
    path = _save(tmp_path, "RGB", (2, 1), [(10, 20, 30), (40, 50, 60)])
    image = Image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.channels == 3
    assert image.internal_format is ImageInternalFormat.RGB8
    assert image.data_format is ImageDataFormat.RGB
    assert image.data == bytes([10, 20, 30, 40, 50, 60])


def test_rgba_image(tmp_path):
    path = _save(tmp_path, "RGBA", (1, 2), [(1, 2, 3, 4), (5, 6, 7, 8)])
    image = Image(str(path))
    assert (image.width, image.height) == (1, 2)
    assert image.channels == 4
    assert image.internal_format is ImageInternalFormat.RGBA8
    assert image.data_format is ImageDataFormat.RGBA
    assert image.data == bytes([1, 2, 3, 4, 5, 6, 7, 8])


def test_data_length_matches_dimensions(tmp_path):
    path = _save(tmp_path, "RGB", (3, 4), [(0, 0, 0)] * 12)
    image = Image(path)
    assert len(image.data) == image.width * image.height * image.channels


def test_palette_image_expands_to_rgb(tmp_path):
    img = PILImage.new("RGB", (2, 2), (200, 100, 50)).convert("P")
    path = tmp_path / "palette.png"
    img.save(path)
    image = Image(path)
    assert image.channels == 3
    assert image.data_format is ImageDataFormat.RGB
    assert image.data[:3] == bytes([200, 100, 50])


def test_grayscale_is_rejected(tmp_path):
    path = _save(tmp_path, "L", (2, 2), [0, 64, 128, 255])
    with pytest.raises(ValueError):
        Image(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Image(tmp_path / "missing.png")