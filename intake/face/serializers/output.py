from rest_framework import serializers

class ValidatePhotoOutputSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
