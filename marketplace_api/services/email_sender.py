"""Resend email delivery"""
import logging

import httpx

from marketplace_api.config import get_settings
from marketplace_api.exceptions import DeliveryError
from marketplace_api.models.notification import OutgoingEmail

logger = logging.getLogger(__name__)
settings = get_settings()


async def send_email(email: OutgoingEmail) -> str:
    """
    Send one email via Resend.

    No retries: a failed send is terminal for the request.

    Returns:
        Resend message id

    Raises:
        DeliveryError: On a non-2xx response or transport failure
    """
    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                settings.resend_api_url,
                headers={
                    "Authorization": f"Bearer {settings.resend_api_key}",
                    "Content-Type": "application/json"
                },
                json={
                    "from": email.from_address,
                    "to": [email.to_email],
                    "subject": email.subject,
                    "html": email.html_content
                }
            )
    except httpx.HTTPError as e:
        logger.error(f"Email transport error: {e}")
        raise DeliveryError(str(e) or e.__class__.__name__) from e

    if not response.is_success:
        error_msg = f"Failed to send email: {response.status_code} - {response.text}"
        logger.error(error_msg)
        raise DeliveryError(error_msg)

    message_id = response.json().get("id")
    logger.info(f"Email sent to {email.to_email} (id: {message_id})")
    return message_id
