"""Notification email endpoint"""
from fastapi import APIRouter, HTTPException, Depends, Request, Response
from pydantic import ValidationError
from typing import Dict
import json
import logging

from marketplace_api.exceptions import InvalidRequestError
from marketplace_api.middleware.auth import get_current_user
from marketplace_api.models.notification import SendEmailRequest
from marketplace_api.services.notification_dispatcher import dispatch_notification
from marketplace_api.services.rate_limiter import email_rate_limiter

logger = logging.getLogger(__name__)
router = APIRouter()


async def parse_send_email_request(request: Request) -> SendEmailRequest:
    """Read the JSON body, reporting malformed input as a 400"""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidRequestError("Request body must be JSON")

    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    try:
        return SendEmailRequest.model_validate(body)
    except ValidationError as e:
        field = ".".join(str(part) for part in e.errors()[0]["loc"]) if e.errors() else "body"
        raise InvalidRequestError(f"Invalid field: {field}")


@router.options("/send-email")
async def send_email_preflight():
    """CORS preflight"""
    return Response(status_code=200)


@router.post("/send-email")
async def send_email(request: Request, auth_data: Dict = Depends(get_current_user)):
    """Render a notification template and send it via Resend"""
    if not email_rate_limiter.check(auth_data["user_id"]):
        raise HTTPException(status_code=429, detail="Too many requests. Please try again later.")

    email_request = await parse_send_email_request(request)
    result = await dispatch_notification(email_request)
    return result.model_dump(exclude_none=True)
