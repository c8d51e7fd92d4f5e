from django.contrib import admin
from .models import TelegramUser


@admin.register(TelegramUser)
class TelegramUserAdmin(admin.ModelAdmin):
    list_display = (
        "telegram_id",
        "username",
        "display_name",
        "created_at",
    )
    search_fields = (
        "telegram_id",
        "username",
        "first_name",
        "last_name",
    )
    readonly_fields = ("telegram_id", "created_at")
    date_hierarchy = "created_at"

    # Authors are referenced by the review ledger
    def has_delete_permission(self, request, obj=None):
        return False
