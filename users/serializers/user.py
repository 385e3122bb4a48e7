from rest_framework import serializers
from ..models import User


class UserOutSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ("id", "first_name", "last_name", "photo", "description", "created_at", "updated_at")
        read_only_fields = fields


class UserWriteSerializer(serializers.ModelSerializer):
    """
    Création / remplacement d'une fiche. La photo est obligatoire:
    elle passe par la validation visage puis part dans le storage.
    """
    photo_content_base64 = serializers.CharField(write_only=True)
    photo_name = serializers.CharField(write_only=True, required=False, allow_blank=True, max_length=200)

    class Meta:
        model = User
        fields = ("first_name", "last_name", "description", "photo_content_base64", "photo_name")
