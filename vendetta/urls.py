from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include

from vendetta.apps.telegram_auth.views import me


def health_check(request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("admin/", admin.site.urls),
    path("auth/", include("vendetta.apps.telegram_auth.urls")),
    path("me", me, name="me"),
    path("accounts/", include("vendetta.apps.accounts.urls")),
    path("reviews", include("vendetta.apps.reviews.urls")),
    path("healthz", health_check),
]
