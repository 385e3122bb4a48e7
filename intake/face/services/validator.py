from intake.vision.services.provider import AnalyzedImage, BaseVisionProvider


def has_face(analysis: AnalyzedImage) -> bool:
    return len(analysis.faces) > 0


class FaceValidator:
    """
    Photo de profil acceptable <=> au moins un visage détecté.
    Un seul appel vision ; les erreurs du service remontent telles quelles.
    """
    def __init__(self, provider: BaseVisionProvider) -> None:
        self.provider = provider

    def validate(self, image: bytes) -> bool:
        return has_face(self.provider.analyze_scene(image_bytes=image))
