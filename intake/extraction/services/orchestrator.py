import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from intake.face.services.validator import FaceValidator
from intake.ocr.services.recognizer import RecognizedWord, TextRecognizer
from intake.ocr.services.resolver import nearest_text
from intake.portrait.services.extractor import PersonRegionExtractor
from intake.vision.services.provider import BaseVisionProvider

logger = logging.getLogger(__name__)

# Libellés imprimés sur la carte d'identité (préfixe, pas égalité stricte)
FIRST_NAME_LABEL = "NOME"
LAST_NAME_LABEL = "COGNOME"


@dataclass(frozen=True)
class ExtractedUserData:
    portrait: Optional[bytes]  # PNG
    first_name: str = ""
    last_name: str = ""


def find_label(words: Sequence[RecognizedWord], prefix: str) -> Optional[RecognizedWord]:
    return next((w for w in words if w.text.startswith(prefix)), None)


def resolve_field(words: Sequence[RecognizedWord], prefix: str) -> str:
    label = find_label(words, prefix)
    if label is None:
        return ""
    return nearest_text(words, label) or ""


class ExtractionOrchestrator:
    """
    Pipeline d'intake d'un scan de document:
    1) analyse de scène (1 appel)  2) découpe du portrait
    3) OCR (1 appel)               4-6) NOME / COGNOME -> mot le plus proche
    Erreur du service vision => remonte, pas de résultat partiel.
    Libellé ou voisin introuvable => "" (jamais une erreur).
    """
    def __init__(self, provider: BaseVisionProvider) -> None:
        self.provider = provider
        self.face_validator = FaceValidator(provider)
        self.portrait_extractor = PersonRegionExtractor()
        self.text_recognizer = TextRecognizer(provider)

    def validate_photo(self, image: bytes) -> bool:
        return self.face_validator.validate(image)

    def extract_user_data(self, image: bytes) -> ExtractedUserData:
        analysis = self.provider.analyze_scene(image_bytes=image)
        portrait = self.portrait_extractor.extract(analysis, image)
        words = self.text_recognizer.recognize(image)

        data = ExtractedUserData(
            portrait=portrait,
            first_name=resolve_field(words, FIRST_NAME_LABEL),
            last_name=resolve_field(words, LAST_NAME_LABEL),
        )
        logger.info(
            "extraction done: portrait=%s words=%d first_name=%s last_name=%s",
            portrait is not None, len(words), bool(data.first_name), bool(data.last_name),
        )
        return data
