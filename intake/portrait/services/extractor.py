import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from intake.vision.services.provider import AnalyzedImage

logger = logging.getLogger(__name__)

PERSON_LABEL = "person"
PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}


class PersonRegionExtractor:
    """
    Découpe le portrait d'un scan à partir du 1er objet détecté.
    - seul objects[0] compte (pas de tri par confiance)
    - label != "person" ou liste vide => None (cas normal, pas une erreur)
    - box hors image => rognée aux bords ; aucune intersection => None
    Sortie: PNG (sans perte).
    """

    def extract(self, analysis: AnalyzedImage, image: bytes) -> Optional[bytes]:
        if not analysis.objects or analysis.objects[0].label != PERSON_LABEL:
            return None
        box = analysis.objects[0].box

        try:
            with Image.open(io.BytesIO(image)) as original:
                original.load()
                clipped = box.clip(*original.size)
                if clipped is None:
                    logger.info("person box %s outside image %s", box, original.size)
                    return None
                if clipped != box:
                    logger.info("person box %s clipped to %s", box, clipped)
                portrait = original.crop(clipped.as_crop_box())
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
            raise ValueError("INVALID_IMAGE")

        if portrait.mode not in PNG_MODES:
            portrait = portrait.convert("RGB")  # CMYK, YCbCr (JPEG) ...
        out = io.BytesIO()
        portrait.save(out, format="PNG")
        return out.getvalue()
