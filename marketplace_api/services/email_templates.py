"""HTML email templates, one per notification type"""
from typing import Any, Callable, Dict

from marketplace_api.config import get_settings
from marketplace_api.exceptions import InvalidRequestError
from marketplace_api.models.notification import NotificationType, RenderedEmail

settings = get_settings()

ACCENT = "#10b981"
GRADIENT = "linear-gradient(135deg, #10b981 0%, #06b6d4 100%)"
SIGNATURE = "VA Marketplace"


def _format_value(value: Any) -> str:
    # JSON-style text: 25.0 -> "25", True -> "true"
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _field(data: Dict[str, Any], key: str) -> str:
    # Payload values are inserted without escaping, missing ones render empty
    return _format_value(data.get(key))


def _link(path: str) -> str:
    return f"{settings.frontend_url.rstrip('/')}/#/{path}"


def _layout(heading: str, body: str, action_url: str, action_label: str) -> str:
    """Wrap template content in the shared card layout"""
    return f"""
      <div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="background: {GRADIENT}; padding: 2px; border-radius: 16px;">
          <div style="background: #111827; padding: 32px; border-radius: 14px;">
            <h2 style="color: {ACCENT}; margin: 0 0 24px 0; font-size: 24px;">{heading}</h2>
            {body}
            <a href="{action_url}"
               style="display: inline-block; background: {GRADIENT}; color: #111827; padding: 14px 28px; border-radius: 10px; text-decoration: none; font-weight: 600; margin-top: 8px;">
              {action_label}
            </a>
            <p style="color: #6b7280; font-size: 14px; margin-top: 32px; padding-top: 24px; border-top: 1px solid #374151;">
              {SIGNATURE}
            </p>
          </div>
        </div>
      </div>
    """


def new_message_template(data: Dict[str, Any]) -> RenderedEmail:
    sender = _field(data, "senderName")
    body = f"""
            <p style="color: #d1d5db; margin: 0 0 16px 0;">Hi {_field(data, "recipientName")},</p>
            <p style="color: #d1d5db; margin: 0 0 16px 0;"><strong style="color: #f3f4f6;">{sender}</strong> sent you a message:</p>
            <div style="background: #1f2937; padding: 16px; border-radius: 12px; margin: 24px 0; border-left: 4px solid {ACCENT};">
              <p style="margin: 0; color: #e5e7eb; font-style: italic;">"{_field(data, "preview")}"</p>
            </div>
    """
    return RenderedEmail(
        subject=f"New message from {sender}",
        html=_layout(
            "New Message",
            body,
            _link(f"messages/{_field(data, 'conversationId')}"),
            "View Message",
        ),
    )


def job_application_template(data: Dict[str, Any]) -> RenderedEmail:
    job_title = _field(data, "jobTitle")
    body = f"""
            <p style="color: #d1d5db; margin: 0 0 16px 0;">Hi {_field(data, "clientName")},</p>
            <p style="color: #d1d5db; margin: 0 0 16px 0;"><strong style="color: #f3f4f6;">{_field(data, "applicantName")}</strong> applied for your job posting:</p>
            <div style="background: #1f2937; padding: 20px; border-radius: 12px; margin: 24px 0;">
              <h3 style="margin: 0 0 8px 0; color: #f3f4f6; font-size: 18px;">{job_title}</h3>
              <p style="margin: 0; color: {ACCENT}; font-weight: 600;">Proposed rate: ${_field(data, "proposedRate")}/hr</p>
            </div>
    """
    return RenderedEmail(
        subject=f'New application for "{job_title}"',
        html=_layout(
            "New Job Application",
            body,
            _link(f"jobs/{_field(data, 'jobId')}"),
            "Review Application",
        ),
    )


def interview_scheduled_template(data: Dict[str, Any]) -> RenderedEmail:
    other_party = _field(data, "otherPartyName")
    body = f"""
            <p style="color: #d1d5db; margin: 0 0 16px 0;">Hi {_field(data, "recipientName")},</p>
            <p style="color: #d1d5db; margin: 0 0 16px 0;">Your interview with <strong style="color: #f3f4f6;">{other_party}</strong> has been scheduled:</p>
            <div style="background: #1f2937; padding: 20px; border-radius: 12px; margin: 24px 0;">
              <p style="margin: 0 0 8px 0; color: #e5e7eb;"><strong>Date:</strong> {_field(data, "date")}</p>
              <p style="margin: 0 0 8px 0; color: #e5e7eb;"><strong>Time:</strong> {_field(data, "time")}</p>
              <p style="margin: 0; color: #e5e7eb;"><strong>Duration:</strong> {_field(data, "duration")} minutes</p>
            </div>
    """
    return RenderedEmail(
        subject=f"Interview scheduled with {other_party}",
        html=_layout(
            "📅 Interview Scheduled",
            body,
            _link("my-interviews"),
            "View Interview Details",
        ),
    )


def assessment_passed_template(data: Dict[str, Any]) -> RenderedEmail:
    skill = _field(data, "skillName")
    body = f"""
            <p style="color: #d1d5db; margin: 0 0 16px 0;">Hi {_field(data, "vaName")},</p>
            <p style="color: #d1d5db; margin: 0 0 16px 0;">You've successfully passed the <strong style="color: #f3f4f6;">{skill}</strong> assessment!</p>
            <div style="background: #1f2937; padding: 20px; border-radius: 12px; margin: 24px 0; text-align: center;">
              <p style="margin: 0 0 8px 0; color: #e5e7eb; font-size: 14px;">Your Score</p>
              <p style="margin: 0; color: {ACCENT}; font-size: 48px; font-weight: bold;">{_field(data, "score")}%</p>
              <p style="margin: 16px 0 0 0; color: {ACCENT};">✓ Verified badge added to your profile</p>
            </div>
            <p style="color: #d1d5db; margin: 0 0 16px 0;">Clients can now see your verified skill, which helps you stand out from other VAs!</p>
    """
    return RenderedEmail(
        subject=f"🎉 You passed the {skill} assessment!",
        html=_layout(
            "🎉 Congratulations!",
            body,
            _link("dashboard"),
            "View Your Profile",
        ),
    )


TEMPLATES: Dict[NotificationType, Callable[[Dict[str, Any]], RenderedEmail]] = {
    NotificationType.NEW_MESSAGE: new_message_template,
    NotificationType.JOB_APPLICATION: job_application_template,
    NotificationType.INTERVIEW_SCHEDULED: interview_scheduled_template,
    NotificationType.ASSESSMENT_PASSED: assessment_passed_template,
}


def render_email(kind: str, data: Dict[str, Any]) -> RenderedEmail:
    """
    Render subject and HTML body for a notification

    Args:
        kind: Notification type value (e.g. "new_message")
        data: Template fields

    Raises:
        InvalidRequestError: If kind has no template
    """
    try:
        template = TEMPLATES[NotificationType(kind)]
    except ValueError:
        raise InvalidRequestError("Invalid email type")
    return template(data)
