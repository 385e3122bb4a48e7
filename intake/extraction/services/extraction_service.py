from typing import Optional

from intake.vision.services.factory import get_vision_provider
from intake.vision.services.images import decode_image_base64, encode_image_base64

from .orchestrator import ExtractedUserData, ExtractionOrchestrator


class ExtractionService:
    """
    Façade HTTP -> pipeline: décodage base64 / taille, puis orchestrateur
    branché sur le provider vision du process.
    """
    def __init__(self, orchestrator: Optional[ExtractionOrchestrator] = None) -> None:
        self.orchestrator = orchestrator or ExtractionOrchestrator(get_vision_provider())

    def run(self, *, image_base64: str) -> ExtractedUserData:
        return self.orchestrator.extract_user_data(decode_image_base64(image_base64))

    def validate_photo(self, *, image_base64: str) -> bool:
        return self.validate_photo_bytes(decode_image_base64(image_base64))

    def validate_photo_bytes(self, image_bytes: bytes) -> bool:
        return self.orchestrator.validate_photo(image_bytes)


def to_payload(data: ExtractedUserData) -> dict:
    return {
        "portrait_base64": encode_image_base64(data.portrait),
        "first_name": data.first_name,
        "last_name": data.last_name,
    }
