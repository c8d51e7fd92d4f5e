"""
Telegram Login Widget signature check.

See https://core.telegram.org/widgets/login#checking-authorization

    data_check_string = "\\n".join(sorted(f"{key}={value}" for every non-empty field but hash))
    secret_key        = SHA256(bot_token)
    valid             = hex(HMAC_SHA256(secret_key, data_check_string)) == hash
"""
import hashlib
import hmac
import time
from typing import Any, Mapping, Optional

HASH_FIELD = "hash"


def build_data_check_string(assertion: Mapping[str, Any]) -> str:
    # str sort is by code point, which matches the byte order of UTF-8
    pairs = sorted(
        f"{key}={value}"
        for key, value in assertion.items()
        if key != HASH_FIELD and value is not None and value != ""
    )
    return "\n".join(pairs)


def compute_hash(assertion: Mapping[str, Any], bot_token: str) -> str:
    secret_key = hashlib.sha256(bot_token.encode("utf-8")).digest()
    check_string = build_data_check_string(assertion).encode("utf-8")
    return hmac.new(secret_key, check_string, hashlib.sha256).hexdigest()


def verify_login(assertion: Mapping[str, Any], bot_token: Optional[str]) -> bool:
    if not bot_token:
        return False
    supplied = assertion.get(HASH_FIELD)
    if not supplied:
        return False

    expected = compute_hash(assertion, bot_token)
    return hmac.compare_digest(
        expected.encode("ascii"), str(supplied).lower().encode("utf-8")
    )


def is_fresh(auth_date: int, max_age: int, now: Optional[float] = None) -> bool:
    """A max_age of 0 (or less) turns the check off."""
    if max_age <= 0:
        return True
    now = time.time() if now is None else now
    return now - auth_date <= max_age
