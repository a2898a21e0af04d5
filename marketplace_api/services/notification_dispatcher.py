"""Template selection, recipient resolution and delivery for one notification"""
import logging

from marketplace_api.config import get_settings
from marketplace_api.exceptions import InvalidRequestError
from marketplace_api.models.notification import (
    DispatchResult,
    OutgoingEmail,
    SendEmailRequest,
)
from marketplace_api.services import email_sender, user_directory
from marketplace_api.services.email_templates import render_email

logger = logging.getLogger(__name__)
settings = get_settings()

NO_EMAIL = "no_email"


async def dispatch_notification(request: SendEmailRequest) -> DispatchResult:
    """
    Render and send a notification email.

    At most one user lookup and one send, in that order.

    Raises:
        InvalidRequestError: Missing fields or unknown type
        DeliveryError: Resend rejected the email
    """
    if not request.type or (not request.to and not request.to_user_id) or request.data is None:
        raise InvalidRequestError("Missing required fields")

    rendered = render_email(request.type, request.data)

    recipient = request.to
    if not recipient and request.to_user_id:
        recipient = user_directory.get_user_email(request.to_user_id)

    if not recipient:
        logger.info(f"No email found for user: {request.to_user_id}")
        return DispatchResult(success=False, reason=NO_EMAIL)

    message_id = await email_sender.send_email(
        OutgoingEmail(
            to_email=recipient,
            subject=rendered.subject,
            html_content=rendered.html,
            from_address=settings.email_from,
        )
    )
    return DispatchResult(success=True, id=message_id)
