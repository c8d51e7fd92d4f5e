import logging

from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from vendetta.apps.users.services.registration import register_login
from vendetta.errors import AuthenticationFailure, ConfigurationError
from vendetta.validation import read_json, validate_payload

from .serializers import TelegramLoginSerializer, TelegramUserSerializer
from .sessions import establish, session_required, terminate
from .verification import is_fresh, verify_login

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def telegram_login(request):
    """Verify a Login Widget assertion and open a session for that user."""
    bot_token = (getattr(settings, "TELEGRAM_BOT_TOKEN", "") or "").strip()
    if not bot_token:
        raise ConfigurationError("TELEGRAM_BOT_TOKEN is not configured")

    assertion = validate_payload(TelegramLoginSerializer, read_json(request))

    if not verify_login(assertion, bot_token):
        logger.warning(f"[Auth] Rejected login for telegram id {assertion['id']}: bad hash")
        raise AuthenticationFailure("Invalid Telegram signature")

    if not is_fresh(assertion["auth_date"], settings.TELEGRAM_AUTH_MAX_AGE):
        logger.warning(f"[Auth] Rejected login for telegram id {assertion['id']}: stale")
        raise AuthenticationFailure("Telegram login has expired")

    user, _ = register_login(
        telegram_id=assertion["id"],
        username=assertion["username"],
        first_name=assertion["first_name"],
        last_name=assertion["last_name"],
    )
    establish(request, user)
    logger.info(f"[Auth] User #{user.id} logged in")

    return JsonResponse(TelegramUserSerializer(user).data)


@csrf_exempt
@require_POST
def logout(request):
    terminate(request)
    return HttpResponse(status=200)


@require_GET
@session_required
def me(request):
    return JsonResponse(TelegramUserSerializer(request.telegram_user).data)
