from rest_framework import serializers

class ExtractOutputSerializer(serializers.Serializer):
    portrait_base64 = serializers.CharField(allow_null=True)  # PNG découpé, null si aucune "person"
    first_name = serializers.CharField(allow_blank=True)
    last_name = serializers.CharField(allow_blank=True)
