import io

import pytest
from PIL import Image

from src.eduattend.eduattend.classrooms.qr import decode_join_code, render_join_code_png
from src.eduattend.eduattend.core.exceptions import ValidationError


def test_render_join_code_png_is_a_valid_image():
    buf = render_join_code_png("EDU-1234ABCD")
    img = Image.open(buf)
    assert img.format == "PNG"
    assert img.size[0] == img.size[1]


def test_decode_rejects_non_image_upload():
    with pytest.raises(ValidationError):
        decode_join_code(io.BytesIO(b"definitely not an image"))


def test_decode_rejects_truncated_png():
    truncated = render_join_code_png("EDU-1234ABCD").getvalue()[:60]
    with pytest.raises(ValidationError):
        decode_join_code(io.BytesIO(truncated))


def test_decode_reads_rendered_code():
    pytest.importorskip("pyzbar.pyzbar")
    assert decode_join_code(render_join_code_png("EDU-1234ABCD")) == "EDU-1234ABCD"
