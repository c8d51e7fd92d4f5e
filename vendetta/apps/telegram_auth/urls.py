from django.urls import path
from .views import logout, telegram_login

urlpatterns = [
    path("telegram", telegram_login, name="auth-telegram"),
    path("logout", logout, name="auth-logout"),
]
