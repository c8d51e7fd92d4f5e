from rest_framework import serializers

from vendetta.apps.reviews.serializers import ReviewSerializer

from .fields import PlatformField
from .models import SocialAccount


class AccountSearchSerializer(serializers.Serializer):
    handle = serializers.CharField(trim_whitespace=False)
    platform = PlatformField()


class SocialAccountSerializer(serializers.ModelSerializer):
    """Account card; the review slice is passed in as context["reviews"]."""

    platform = PlatformField()
    externalId = serializers.CharField(source="external_id", allow_null=True)
    reviewsCount = serializers.IntegerField(source="reviews_count")
    reviews = serializers.SerializerMethodField()

    class Meta:
        model = SocialAccount
        fields = [
            "id",
            "platform",
            "handle",
            "externalId",
            "rating",
            "reviewsCount",
            "reviews",
        ]

    def get_reviews(self, obj):
        return ReviewSerializer(self.context.get("reviews", []), many=True).data
