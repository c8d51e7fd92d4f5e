"""
Cookie sessions bound to a ``TelegramUser``.

The session carries only the internal user id and the username claim. Expiry
is sliding: ``SESSION_SAVE_EVERY_REQUEST`` re-issues the cookie on every
request that goes through an active session.
"""
from functools import wraps
from typing import Optional

from vendetta.apps.users.models import TelegramUser
from vendetta.errors import AuthenticationFailure

SESSION_USER_ID = "user_id"
SESSION_USERNAME = "username"


def establish(request, user: TelegramUser) -> str:
    # New key on every login (no session fixation)
    request.session.cycle_key()
    request.session[SESSION_USER_ID] = user.id
    request.session[SESSION_USERNAME] = user.username
    return request.session.session_key


def current_user(request) -> Optional[TelegramUser]:
    user_id = request.session.get(SESSION_USER_ID)
    if user_id is None:
        return None
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return TelegramUser.objects.filter(pk=user_id).first()


def terminate(request) -> None:
    request.session.flush()


def session_required(view):
    """Reject the request with 401 unless it carries a live session.

    The resolved user is exposed as ``request.telegram_user``.
    """

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        user = current_user(request)
        if user is None:
            raise AuthenticationFailure("Login with Telegram first")
        request.telegram_user = user
        return view(request, *args, **kwargs)

    return wrapper
