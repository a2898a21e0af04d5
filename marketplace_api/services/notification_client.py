"""Request builders and HTTP client for the send-email endpoint"""
from typing import Optional, Union
import logging

import httpx

from marketplace_api.models.notification import NotificationType, SendEmailRequest

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200


def new_message_notification(
    recipient_user_id: str,
    recipient_name: str,
    sender_name: str,
    preview: str,
    conversation_id: str,
) -> SendEmailRequest:
    if len(preview) > PREVIEW_LENGTH:
        preview = preview[:PREVIEW_LENGTH] + "..."
    return SendEmailRequest(
        type=NotificationType.NEW_MESSAGE.value,
        to_user_id=recipient_user_id,
        data={
            "recipientName": recipient_name,
            "senderName": sender_name,
            "preview": preview,
            "conversationId": conversation_id,
        },
    )


def job_application_notification(
    client_user_id: str,
    client_name: str,
    applicant_name: str,
    job_title: str,
    job_id: str,
    proposed_rate: Optional[Union[int, float]],
) -> SendEmailRequest:
    return SendEmailRequest(
        type=NotificationType.JOB_APPLICATION.value,
        to_user_id=client_user_id,
        data={
            "clientName": client_name,
            "applicantName": applicant_name,
            "jobTitle": job_title,
            "jobId": job_id,
            "proposedRate": proposed_rate or "Not specified",
        },
    )


def interview_scheduled_notification(
    recipient_user_id: str,
    recipient_name: str,
    other_party_name: str,
    date: str,
    time: str,
    duration: int,
) -> SendEmailRequest:
    return SendEmailRequest(
        type=NotificationType.INTERVIEW_SCHEDULED.value,
        to_user_id=recipient_user_id,
        data={
            "recipientName": recipient_name,
            "otherPartyName": other_party_name,
            "date": date,
            "time": time,
            "duration": duration,
        },
    )


def assessment_passed_notification(
    va_user_id: str,
    va_name: str,
    skill_name: str,
    score: Union[int, float],
) -> SendEmailRequest:
    return SendEmailRequest(
        type=NotificationType.ASSESSMENT_PASSED.value,
        to_user_id=va_user_id,
        data={
            "vaName": va_name,
            "skillName": skill_name,
            "score": score,
        },
    )


class NotificationClient:
    """
    Posts notification requests to a running send-email endpoint.

    Sending is best effort: failures are logged and reported as False.
    """

    def __init__(self, base_url: str, auth_token: str, path: str = "/api/send-email"):
        self.url = f"{base_url.rstrip('/')}{path}"
        self.auth_token = auth_token

    async def send(self, request: SendEmailRequest) -> bool:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url,
                    headers={
                        "Authorization": f"Bearer {self.auth_token}",
                        "Content-Type": "application/json"
                    },
                    json=request.model_dump(mode="json", by_alias=True, exclude_none=True),
                )
        except httpx.HTTPError as e:
            logger.error(f"Email send error: {e}")
            return False

        if not response.is_success:
            logger.error(f"Email send failed: {response.text}")
            return False

        try:
            result = response.json()
        except ValueError:
            logger.error(f"Email send returned a non-JSON body: {response.text}")
            return False

        if not isinstance(result, dict):
            logger.error(f"Email send returned an unexpected body: {response.text}")
            return False

        return bool(result.get("success"))
