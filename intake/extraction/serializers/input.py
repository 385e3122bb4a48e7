from rest_framework import serializers

class ExtractInputSerializer(serializers.Serializer):
    image_base64 = serializers.CharField()  # scan recto de la carte (JPEG/PNG)
