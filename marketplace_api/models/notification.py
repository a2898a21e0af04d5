"""Notification-related Pydantic models"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, Dict, Any


class NotificationType(str, Enum):
    """Notification kinds, one email template each"""
    NEW_MESSAGE = "new_message"
    JOB_APPLICATION = "job_application"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    ASSESSMENT_PASSED = "assessment_passed"


class SendEmailRequest(BaseModel):
    """
    Body of POST /api/send-email

    Everything is optional here; the dispatcher decides which combinations
    are acceptable so it can answer with a 400 instead of a 422.
    """
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    to: Optional[EmailStr] = None
    to_user_id: Optional[str] = Field(default=None, alias="toUserId")
    data: Optional[Dict[str, Any]] = None

    @field_validator("type", "to", "to_user_id", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RenderedEmail(BaseModel):
    """Subject and HTML body produced by a template"""
    subject: str
    html: str


class OutgoingEmail(BaseModel):
    """Email handed to the Resend API"""
    to_email: EmailStr
    subject: str
    html_content: str
    from_address: str


class DispatchResult(BaseModel):
    """Outcome of a dispatch that did not fail"""
    success: bool
    id: Optional[str] = None
    reason: Optional[str] = None
