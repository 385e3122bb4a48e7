from dataclasses import dataclass
from typing import List, Tuple

from intake.vision.services.provider import BaseVisionProvider, VisionServiceError


@dataclass(frozen=True)
class RecognizedWord:
    text: str                      # normalisé (trim + majuscules), jamais recalculé
    position: Tuple[float, ...]    # >= 2 coordonnées ; (position[0], position[1]) = ancre

    @classmethod
    def from_raw(cls, text: str, position: str) -> "RecognizedWord":
        if not isinstance(text, str):
            raise VisionServiceError(f"Word text is not a string: {text!r}")
        return cls(text=text.strip().upper(), position=parse_position(position))

    @property
    def anchor(self) -> Tuple[float, float]:
        return (self.position[0], self.position[1])


def parse_position(raw: str) -> Tuple[float, ...]:
    try:
        coords = tuple(float(v) for v in raw.split(","))
    except (AttributeError, ValueError) as e:
        raise VisionServiceError(f"Unparsable word position: {raw!r}") from e
    if len(coords) < 2:
        raise VisionServiceError(f"Word position needs >= 2 coordinates: {raw!r}")
    return coords


class TextRecognizer:
    """
    OCR -> liste plate de mots normalisés, dans l'ordre région > ligne > mot.
    Une position illisible invalide tout l'appel (pas de résultat partiel).
    """
    def __init__(self, provider: BaseVisionProvider) -> None:
        self.provider = provider

    def recognize(self, image: bytes) -> List[RecognizedWord]:
        regions = self.provider.recognize_text(image_bytes=image)
        return [
            RecognizedWord.from_raw(word.text, word.bounding_box)
            for region in regions
            for line in region.lines
            for word in line.words
        ]
