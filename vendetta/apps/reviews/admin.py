from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("account", "author", "impact", "created_at")
    list_filter = ("impact", "account__platform")
    search_fields = ("account__handle", "author__username", "text")
    date_hierarchy = "created_at"

    # The ledger is append-only
    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def has_add_permission(self, request):
        return False
