from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from intake.extraction.services.extraction_service import ExtractionService
from intake.vision.services.provider import VisionServiceError

from ..serializers.input import ValidatePhotoInputSerializer
from ..serializers.output import ValidatePhotoOutputSerializer


@extend_schema(
    tags=["Document Intake"],
    request=ValidatePhotoInputSerializer,
    responses={
        200: OpenApiResponse(response=ValidatePhotoOutputSerializer, description="Visage détecté ou non"),
        400: OpenApiResponse(description="INVALID_IMAGE"),
        502: OpenApiResponse(description="VISION_UNAVAILABLE"),
    },
    examples=[OpenApiExample("Réponse", value={"valid": True}, response_only=True)],
)
class ValidatePhotoView(APIView):
    """
    POST /intake/validate-photo
    Pas de visage => valid=false (200), ce n'est pas une erreur.
    """
    serializer_class = ValidatePhotoInputSerializer

    def post(self, request):
        ser = self.serializer_class(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            valid = ExtractionService().validate_photo(image_base64=ser.validated_data["image_base64"])
        except ValueError as e:
            return Response({"error":{"code":"INVALID_IMAGE","message":str(e)}}, status=status.HTTP_400_BAD_REQUEST)
        except VisionServiceError as e:
            return Response({"error":{"code":"VISION_UNAVAILABLE","message":str(e)}}, status=status.HTTP_502_BAD_GATEWAY)

        return Response({"valid": valid}, status=200)
