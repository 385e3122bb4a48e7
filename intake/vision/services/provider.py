"""
Contrat provider-agnostic pour le service vision (analyse de scène + OCR).
Le provider réel est Azure Computer Vision ; un mock déterministe sert en dev.
Les résultats sont des records immuables, créés par appel puis jetés.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .geometry import BoundingBox


class VisionServiceError(Exception):
    """Service vision injoignable ou réponse inexploitable. Jamais masquée."""


@dataclass(frozen=True)
class FaceInfo:
    box: BoundingBox
    age: Optional[int] = None
    gender: Optional[str] = None


@dataclass(frozen=True)
class DetectedObject:
    label: str        # "person", "car", ...
    box: BoundingBox
    confidence: Optional[float] = None


@dataclass(frozen=True)
class AnalyzedImage:
    faces: Tuple[FaceInfo, ...] = ()
    objects: Tuple[DetectedObject, ...] = ()


@dataclass(frozen=True)
class OcrWord:
    text: str
    bounding_box: str  # "x,y,w,h" tel que renvoyé par le service


@dataclass(frozen=True)
class OcrLine:
    words: Tuple[OcrWord, ...] = ()


@dataclass(frozen=True)
class OcrRegion:
    lines: Tuple[OcrLine, ...] = ()


class BaseVisionProvider:
    def analyze_scene(self, *, image_bytes: bytes) -> AnalyzedImage:
        raise NotImplementedError

    def recognize_text(self, *, image_bytes: bytes) -> List[OcrRegion]:
        raise NotImplementedError
