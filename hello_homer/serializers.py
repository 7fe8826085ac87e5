from rest_framework import serializers


class QuoteSerializer(serializers.Serializer):
    """Read-only JSON shape of a Quote."""

    text = serializers.CharField()
    episode_title = serializers.CharField(allow_blank=True)
    season = serializers.IntegerField(allow_null=True)
    image_url = serializers.CharField(allow_blank=True)
    is_fallback = serializers.BooleanField()
