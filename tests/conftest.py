import io

import pytest
from PIL import Image


def _encode_image(image: Image.Image, image_format: str, **params: object) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=image_format, **params)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """A 200x100 solid-colour PNG."""
    return _encode_image(Image.new("RGB", (200, 100), (30, 120, 200)), "PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """A 256x256 gradient JPEG saved at high quality."""
    image = Image.linear_gradient("L").convert("RGB")
    return _encode_image(image, "JPEG", quality=95)


@pytest.fixture()
def rgba_png_bytes() -> bytes:
    """A 64x64 semi-transparent PNG."""
    return _encode_image(Image.new("RGBA", (64, 64), (255, 0, 0, 128)), "PNG")


@pytest.fixture()
def mpo_bytes() -> bytes:
    """A two-frame multi-picture JPEG, as written by phone cameras."""
    primary = Image.linear_gradient("L").convert("RGB")
    secondary = primary.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
    return _encode_image(primary, "MPO", save_all=True, append_images=[secondary], quality=95)
