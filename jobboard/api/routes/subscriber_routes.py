"""
Subscriber Routes

POST /subscribe - Subscribe an email to the daily job digest
"""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from jobboard.api.deps import get_subscriber_service, get_mailer
from jobboard.core.errors import ValidationError, EmailDeliveryError
from jobboard.core.logging import get_logger
from jobboard.services.mailer import Mailer
from jobboard.services.mongo_service import SubscriberService
from jobboard.schemas.schemas import SubscribeRequest, MessageResponse, ErrorResponse

logger = get_logger(__name__)
router = APIRouter(tags=["Subscribers"])


@router.post(
    "/subscribe",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def subscribe(
    body: SubscribeRequest,
    subscribers: SubscriberService = Depends(get_subscriber_service),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Store the subscriber and send a confirmation email.

    The subscriber stays stored even if the confirmation email fails.
    """
    email = (body.email or "").strip()
    if not email:
        raise ValidationError("Email is required")

    subscribers.insert(email)
    logger.info(f"New subscriber: {email}")

    try:
        await run_in_threadpool(mailer.send_confirmation, email)
    except EmailDeliveryError as e:
        raise EmailDeliveryError("Failed to subscribe", details=e.details) from e

    return MessageResponse(message="Subscribed successfully! Confirmation email sent.")
