import logging
import uuid

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)


def photo_path(name: str | None) -> str:
    filename = get_valid_filename(name) if name else f"{uuid.uuid4().hex}.png"
    return f"{settings.PHOTOS_CONTAINER}/{filename}"


def photo_url(path: str) -> str:
    return default_storage.url(path)


def store_photo(path: str, content: bytes) -> str:
    """
    Dépose la photo (écrase un blob de même nom). À appeler après commit de la fiche.
    """
    if default_storage.exists(path):
        default_storage.delete(path)
    saved = default_storage.save(path, ContentFile(content))
    logger.info("photo uploaded: %s (%d bytes)", saved, len(content))
    return saved
