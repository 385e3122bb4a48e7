import base64
import binascii

from django.conf import settings


def decode_image_base64(value: str) -> bytes:
    try:
        image_bytes = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("INVALID_IMAGE_BASE64")

    if not image_bytes or len(image_bytes) > settings.INTAKE_MAX_IMAGE_BYTES:
        raise ValueError("INVALID_IMAGE_SIZE")
    return image_bytes


def encode_image_base64(image_bytes) -> str | None:
    if image_bytes is None:
        return None
    return base64.b64encode(image_bytes).decode()
