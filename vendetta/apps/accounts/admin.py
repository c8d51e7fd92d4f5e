from django.contrib import admin
from .models import SocialAccount


@admin.register(SocialAccount)
class SocialAccountAdmin(admin.ModelAdmin):
    list_display = (
        "platform",
        "handle",
        "external_id",
        "rating",
        "reviews_count",
        "created_at",
    )
    search_fields = ("handle", "external_id")
    list_filter = ("platform",)
    # Totals only move through the review ledger
    readonly_fields = ("rating", "reviews_count", "created_at")
