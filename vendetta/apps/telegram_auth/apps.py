from django.apps import AppConfig


class TelegramAuthConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'vendetta.apps.telegram_auth'
