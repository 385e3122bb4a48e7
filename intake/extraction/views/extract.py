from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiResponse

from intake.vision.services.provider import VisionServiceError

from ..serializers.input import ExtractInputSerializer
from ..serializers.output import ExtractOutputSerializer
from ..services.extraction_service import ExtractionService, to_payload


def extract_user_data_response(data) -> Response:
    """
    Partagé avec users (POST /users/extractuserdata).
    """
    ser = ExtractInputSerializer(data=data)
    ser.is_valid(raise_exception=True)

    try:
        res = ExtractionService().run(image_base64=ser.validated_data["image_base64"])
    except ValueError as e:
        return Response({"error":{"code":"INVALID_IMAGE","message":str(e)}}, status=status.HTTP_400_BAD_REQUEST)
    except VisionServiceError as e:
        return Response({"error":{"code":"VISION_UNAVAILABLE","message":str(e)}}, status=status.HTTP_502_BAD_GATEWAY)

    return Response(to_payload(res), status=200)


@extend_schema(
    tags=["Document Intake"],
    request=ExtractInputSerializer,
    responses={
        200: OpenApiResponse(response=ExtractOutputSerializer, description="Portrait + nom/prénom lus sur le document"),
        400: OpenApiResponse(description="INVALID_IMAGE"),
        502: OpenApiResponse(description="VISION_UNAVAILABLE"),
    },
    examples=[
        OpenApiExample("Requête", value={"image_base64": "<...>"}, request_only=True),
        OpenApiExample(
            "Réponse",
            value={"portrait_base64": "<png...>", "first_name": "MARIO", "last_name": "ROSSI"},
            response_only=True,
        ),
    ],
)
class ExtractUserDataView(APIView):
    """
    POST /intake/extract-user-data
    Analyse de scène + OCR sur un scan de carte d'identité.
    Champs introuvables => "" (pas d'erreur).
    """
    serializer_class = ExtractInputSerializer

    def post(self, request):
        return extract_user_data_response(request.data)
