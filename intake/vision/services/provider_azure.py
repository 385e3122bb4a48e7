import logging
from typing import List, Optional

import httpx

from .geometry import BoundingBox
from .provider import (
    AnalyzedImage, BaseVisionProvider, DetectedObject, FaceInfo,
    OcrLine, OcrRegion, OcrWord, VisionServiceError,
)

logger = logging.getLogger(__name__)

API_PATH = "/vision/v3.2"

# Jeu de features demandé à l'analyse : visages + objets au minimum
VISUAL_FEATURES = (
    "Categories", "Description", "Faces", "ImageType", "Tags",
    "Adult", "Color", "Brands", "Objects",
)


class AzureVisionProvider(BaseVisionProvider):
    """
    Connecteur REST Azure Computer Vision v3.2.
    - analyze : POST {endpoint}/vision/v3.2/analyze?visualFeatures=...
    - ocr     : POST {endpoint}/vision/v3.2/ocr?language=..&detectOrientation=true
    Un seul httpx.Client par instance ; l'instance est partagée par process.
    Pas de retry ici : timeout uniquement, via la config du client.
    """

    def __init__(self, *, endpoint: str, key: str, timeout_s: float = 30.0,
                 ocr_language: str = "unk", client: Optional[httpx.Client] = None) -> None:
        if not endpoint or not key:
            raise ValueError("VISION_ENDPOINT and VISION_KEY are required for the azure provider")
        self.endpoint = endpoint.rstrip("/")
        self.ocr_language = ocr_language
        self.client = client or httpx.Client(timeout=timeout_s, verify=True)
        self._headers = {
            "Ocp-Apim-Subscription-Key": key,
            "Content-Type": "application/octet-stream",
            "User-Agent": "userdesk-vision/1.0",
        }

    def close(self) -> None:
        self.client.close()

    def _post(self, path: str, params: dict, image_bytes: bytes) -> dict:
        url = f"{self.endpoint}{API_PATH}/{path}"
        logger.debug("vision call %s (%d bytes)", url, len(image_bytes))
        try:
            resp = self.client.post(url, params=params, headers=self._headers, content=image_bytes)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("vision %s failed: HTTP %s", path, e.response.status_code)
            raise VisionServiceError(f"HTTP {e.response.status_code}: {e.response.text[:500]}") from e
        except httpx.HTTPError as e:
            logger.warning("vision %s unreachable: %s", path, e)
            raise VisionServiceError(f"Vision service unreachable: {e}") from e
        except ValueError as e:
            raise VisionServiceError(f"Malformed vision response: {e}") from e
        if not isinstance(data, dict):
            raise VisionServiceError(f"Malformed vision response: expected an object, got {type(data).__name__}")
        return data

    def analyze_scene(self, *, image_bytes: bytes) -> AnalyzedImage:
        data = self._post("analyze", {"visualFeatures": ",".join(VISUAL_FEATURES)}, image_bytes)
        try:
            faces = tuple(
                FaceInfo(
                    box=BoundingBox(
                        x=int(f["faceRectangle"]["left"]),
                        y=int(f["faceRectangle"]["top"]),
                        width=int(f["faceRectangle"]["width"]),
                        height=int(f["faceRectangle"]["height"]),
                    ),
                    age=f.get("age"),
                    gender=f.get("gender"),
                )
                for f in (data.get("faces") or [])
            )
            objects = tuple(
                DetectedObject(
                    label=o["object"],
                    box=BoundingBox(
                        x=int(o["rectangle"]["x"]),
                        y=int(o["rectangle"]["y"]),
                        width=int(o["rectangle"]["w"]),
                        height=int(o["rectangle"]["h"]),
                    ),
                    confidence=o.get("confidence"),
                )
                for o in (data.get("objects") or [])
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise VisionServiceError(f"Malformed analyze response: {e}") from e
        return AnalyzedImage(faces=faces, objects=objects)

    def recognize_text(self, *, image_bytes: bytes) -> List[OcrRegion]:
        params = {"language": self.ocr_language, "detectOrientation": "true"}
        data = self._post("ocr", params, image_bytes)
        try:
            return [
                OcrRegion(lines=tuple(
                    OcrLine(words=tuple(
                        OcrWord(text=_word_text(w), bounding_box=w["boundingBox"])
                        for w in (line.get("words") or [])
                    ))
                    for line in (region.get("lines") or [])
                ))
                for region in (data.get("regions") or [])
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise VisionServiceError(f"Malformed ocr response: {e}") from e


def _word_text(word: dict) -> str:
    text = word["text"]
    if not isinstance(text, str):
        raise VisionServiceError(f"Malformed ocr word text: {text!r}")
    return text
