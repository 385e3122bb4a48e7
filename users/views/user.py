from django.shortcuts import get_object_or_404
from django.db import transaction
from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from intake.extraction.serializers.input import ExtractInputSerializer
from intake.extraction.serializers.output import ExtractOutputSerializer
from intake.extraction.services.extraction_service import ExtractionService
from intake.extraction.views.extract import extract_user_data_response
from intake.vision.services.images import decode_image_base64
from intake.vision.services.provider import VisionServiceError

from ..models import User
from ..serializers.user import UserOutSerializer, UserWriteSerializer
from ..services.photo_storage import photo_path, photo_url, store_photo

PHOTO_NOT_VALID = {"error": {"code": "PHOTO_NOT_VALID", "message": "Photo not valid!"}}


def checked_photo(validated_data: dict):
    """
    Décode et valide (visage requis) la photo.
    Retourne (bytes, None) ou (None, Response d'erreur).
    """
    try:
        photo_bytes = decode_image_base64(validated_data.pop("photo_content_base64"))
        valid = ExtractionService().validate_photo_bytes(photo_bytes)
    except ValueError as e:
        return None, Response({"error":{"code":"INVALID_IMAGE","message":str(e)}}, status=status.HTTP_400_BAD_REQUEST)
    except VisionServiceError as e:
        return None, Response({"error":{"code":"VISION_UNAVAILABLE","message":str(e)}}, status=status.HTTP_502_BAD_GATEWAY)

    if not valid:
        return None, Response(PHOTO_NOT_VALID, status=status.HTTP_400_BAD_REQUEST)
    return photo_bytes, None


def upload_after_commit(path: str, photo_bytes: bytes) -> None:
    # Le blob n'est écrit que si la fiche est commitée (pas d'orphelin sous photos/)
    transaction.on_commit(lambda: store_photo(path, photo_bytes))


class UserViewSet(viewsets.GenericViewSet,
                  mixins.ListModelMixin,
                  mixins.RetrieveModelMixin):
    """
    CRUD fiches User. Création/remplacement conditionnés à une photo avec visage.
    """
    queryset = User.objects.all().order_by("id")
    serializer_class = UserOutSerializer
    filterset_fields = ("first_name", "last_name")
    search_fields = ("first_name", "last_name", "description")
    ordering_fields = ("id", "last_name", "created_at")

    def retrieve(self, request, pk=None):
        obj = get_object_or_404(self.get_queryset(), pk=pk)
        return Response(UserOutSerializer(obj).data)

    @extend_schema(request=UserWriteSerializer, responses={201: UserOutSerializer, 400: OpenApiResponse(description="PHOTO_NOT_VALID / INVALID_IMAGE")})
    @transaction.atomic
    def create(self, request):
        ser = UserWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = dict(ser.validated_data)

        photo_bytes, error = checked_photo(data)
        if error is not None:
            return error

        path = photo_path(data.pop("photo_name", None))
        user = User.objects.create(photo=photo_url(path), **data)
        upload_after_commit(path, photo_bytes)
        return Response(UserOutSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=UserWriteSerializer, responses={204: None, 400: OpenApiResponse(description="PHOTO_NOT_VALID / ID_MISMATCH"), 404: None})
    @transaction.atomic
    def update(self, request, pk=None):
        body_id = request.data.get("id")
        if body_id is not None and str(body_id) != str(pk):
            return Response({"error":{"code":"ID_MISMATCH","message":"Body id does not match URL id"}}, status=status.HTTP_400_BAD_REQUEST)

        user = get_object_or_404(User, pk=pk)
        ser = UserWriteSerializer(instance=user, data=request.data)
        ser.is_valid(raise_exception=True)
        data = dict(ser.validated_data)

        photo_bytes, error = checked_photo(data)
        if error is not None:
            return error

        path = photo_path(data.pop("photo_name", None))
        for field, value in data.items():
            setattr(user, field, value)
        user.photo = photo_url(path)
        user.save()
        upload_after_commit(path, photo_bytes)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request, pk=None):
        user = get_object_or_404(User, pk=pk)
        user.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=ExtractInputSerializer, responses={200: ExtractOutputSerializer})
    @action(detail=False, methods=["post"], url_path="extractuserdata")
    def extract_user_data(self, request):
        return extract_user_data_response(request.data)
