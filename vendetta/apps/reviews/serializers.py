from rest_framework import serializers

from vendetta.apps.accounts.fields import PlatformField
from vendetta.apps.accounts.models import MAX_EXTERNAL_ID_LENGTH, Platform

from .models import Review


class ReviewSubmissionSerializer(serializers.Serializer):
    platform = PlatformField(default=Platform.TELEGRAM)
    handle = serializers.CharField(allow_blank=True, trim_whitespace=False)
    externalId = serializers.CharField(
        source="external_id",
        default=None,
        allow_null=True,
        allow_blank=True,
        max_length=MAX_EXTERNAL_ID_LENGTH,
    )
    # stored verbatim
    text = serializers.CharField(default="", allow_blank=True, trim_whitespace=False)
    impact = serializers.IntegerField()


class ReviewSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at")
    author = serializers.SerializerMethodField()

    class Meta:
        model = Review
        fields = ["id", "text", "impact", "createdAt", "author"]

    def get_author(self, obj):
        return {"authorId": obj.author_id}
