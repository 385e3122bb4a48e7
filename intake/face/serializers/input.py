from rest_framework import serializers

class ValidatePhotoInputSerializer(serializers.Serializer):
    image_base64 = serializers.CharField()
