from __future__ import annotations

import io
from typing import IO, Optional

import qrcode
from PIL import Image

from ..core.exceptions import ValidationError


def render_join_code_png(join_code: str) -> io.BytesIO:
    """Render a classroom join code as a PNG QR image."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(join_code)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf


def decode_join_code(stream: IO[bytes]) -> Optional[str]:
    """Return the first QR payload found in an uploaded image, if any."""
    try:
        img = Image.open(stream).convert("RGB")
    except OSError:
        # UnidentifiedImageError and truncated-file errors are both OSError.
        raise ValidationError("Uploaded file is not a readable image")

    # pyzbar loads the native zbar library on import.
    from pyzbar.pyzbar import decode as pyzbar_decode

    decoded = pyzbar_decode(img)
    if not decoded:
        return None
    try:
        return decoded[0].data.decode("utf-8").strip()
    except UnicodeDecodeError:
        raise ValidationError("QR code does not contain a classroom code")
