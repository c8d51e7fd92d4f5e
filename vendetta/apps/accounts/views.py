from django.http import JsonResponse
from django.views.decorators.http import require_GET

from vendetta.apps.reviews.services.ledger import top_reviews
from vendetta.apps.telegram_auth.sessions import session_required
from vendetta.errors import NotFound
from vendetta.validation import validate_payload

from .registry import find_by_handle
from .serializers import AccountSearchSerializer, SocialAccountSerializer


@require_GET
@session_required
def search_account(request):
    """Read-only lookup; a miss never creates the account."""
    query = validate_payload(AccountSearchSerializer, request.GET)

    account = find_by_handle(query["platform"], query["handle"])
    if account is None:
        raise NotFound("Account not found")

    serializer = SocialAccountSerializer(
        account, context={"reviews": top_reviews(account)}
    )
    return JsonResponse(serializer.data)
