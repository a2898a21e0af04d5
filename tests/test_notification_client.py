"""Tests for notification request builders and the HTTP client."""
from __future__ import annotations

import json

import httpx
import pytest

from marketplace_api.services.notification_client import (
    NotificationClient,
    assessment_passed_notification,
    interview_scheduled_notification,
    job_application_notification,
    new_message_notification,
)


def test_long_previews_are_truncated():
    request = new_message_notification("user-2", "Dana", "Omar", "x" * 250, "conv-1")

    assert request.type == "new_message"
    assert request.to_user_id == "user-2"
    assert request.data["preview"] == "x" * 200 + "..."

    short = new_message_notification("user-2", "Dana", "Omar", "hi", "conv-1")
    assert short.data["preview"] == "hi"


@pytest.mark.parametrize("rate, expected", [(22, 22), (None, "Not specified"), (0, "Not specified")])
def test_job_application_rate_fallback(rate, expected):
    request = job_application_notification("client-1", "Priya", "Marco", "Inbox Manager", "job-7", rate)
    assert request.data["proposedRate"] == expected


def test_interview_and_assessment_builders():
    interview = interview_scheduled_notification("user-3", "Lee", "Acme Corp", "2026-11-02", "14:30", 45)
    assert interview.type == "interview_scheduled"
    assert interview.data["duration"] == 45

    assessment = assessment_passed_notification("va-1", "Sam", "Bookkeeping", 92)
    assert assessment.type == "assessment_passed"
    assert assessment.to_user_id == "va-1"
    assert assessment.data == {"vaName": "Sam", "skillName": "Bookkeeping", "score": 92}


@pytest.mark.asyncio
async def test_client_posts_wire_format(resend):
    resend.payload = {"success": True, "id": "msg_1"}
    client = NotificationClient("https://api.example.com/", "token-abc")

    sent = await client.send(assessment_passed_notification("va-1", "Sam", "Bookkeeping", 92))

    assert sent is True
    request = resend.requests[0]
    assert str(request.url) == "https://api.example.com/api/send-email"
    assert request.headers["Authorization"] == "Bearer token-abc"
    assert json.loads(request.content) == {
        "type": "assessment_passed",
        "toUserId": "va-1",
        "data": {"vaName": "Sam", "skillName": "Bookkeeping", "score": 92},
    }


@pytest.mark.asyncio
async def test_client_reports_failures_as_false(resend):
    client = NotificationClient("https://api.example.com", "token-abc")
    request = assessment_passed_notification("va-1", "Sam", "Bookkeeping", 92)

    resend.payload = {"success": False, "reason": "no_email"}
    assert await client.send(request) is False

    resend.status_code = 400
    resend.payload = {"error": "Invalid email type"}
    assert await client.send(request) is False

    resend.error = httpx.ConnectError("offline")
    assert await client.send(request) is False


@pytest.mark.asyncio
async def test_client_treats_non_json_success_as_false(resend):
    resend.handler = lambda request: httpx.Response(200, text="<html>ok</html>")
    client = NotificationClient("https://api.example.com", "token-abc")

    sent = await client.send(assessment_passed_notification("va-1", "Sam", "Bookkeeping", 92))

    assert sent is False
