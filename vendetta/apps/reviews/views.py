from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from vendetta.apps.telegram_auth.sessions import session_required
from vendetta.validation import read_json, validate_payload

from .serializers import ReviewSubmissionSerializer
from .services.ledger import record_review


@csrf_exempt
@require_POST
@session_required
def submit_review(request):
    payload = validate_payload(ReviewSubmissionSerializer, read_json(request))

    receipt = record_review(
        author=request.telegram_user,
        platform=payload["platform"],
        handle=payload["handle"],
        text=payload["text"],
        impact=payload["impact"],
        external_id=payload["external_id"],
    )
    return JsonResponse(
        {
            "id": receipt.account_id,
            "rating": receipt.rating,
            "reviewsCount": receipt.reviews_count,
        }
    )
