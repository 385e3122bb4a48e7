import io
from typing import List

from PIL import Image, UnidentifiedImageError

from .geometry import BoundingBox
from .provider import (
    AnalyzedImage, BaseVisionProvider, DetectedObject, FaceInfo,
    OcrLine, OcrRegion, OcrWord,
)


class MockVisionProvider(BaseVisionProvider):
    """
    Provider fake/maquette déterministe:
    - image décodable par Pillow => 1 visage + 1 "person" sur le tiers gauche
    - bytes non décodables => aucun visage, aucun objet
    - OCR figé façon carte d'identité (COGNOME ROSSI / NOME MARIO)
    À ne pas utiliser en prod (settings.prod force "azure").
    """

    def _size(self, image_bytes: bytes):
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                return img.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
            return None

    def analyze_scene(self, *, image_bytes: bytes) -> AnalyzedImage:
        size = self._size(image_bytes)
        if size is None:
            return AnalyzedImage()
        width, height = size
        portrait = BoundingBox(x=0, y=0, width=max(width // 3, 1), height=height)
        face = BoundingBox(x=0, y=0, width=max(width // 3, 1), height=max(height // 2, 1))
        return AnalyzedImage(
            faces=(FaceInfo(box=face, age=30, gender="unknown"),),
            objects=(DetectedObject(label="person", box=portrait, confidence=0.9),),
        )

    def recognize_text(self, *, image_bytes: bytes) -> List[OcrRegion]:
        return [
            OcrRegion(lines=(
                OcrLine(words=(OcrWord("COGNOME", "200,40,90,14"), OcrWord("ROSSI", "260,40,60,14"))),
                OcrLine(words=(OcrWord("NOME", "200,200,50,14"), OcrWord("MARIO", "260,200,60,14"))),
            )),
        ]
