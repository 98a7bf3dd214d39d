"""Shared fixtures: in-memory Mongo, recording AI client and mailer, API client."""
from typing import List, Tuple, Union

import mongomock
import pytest
from fastapi.testclient import TestClient

from jobboard.api.deps import get_ai_client, get_job_service, get_mailer, get_subscriber_service
from jobboard.core.config import Settings, get_settings
from jobboard.core.errors import EmailDeliveryError
from jobboard.main import app
from jobboard.services.ai_client import AIClient
from jobboard.services.mailer import Mailer
from jobboard.services.mongo_service import JobService, SubscriberService


VALID_FEEDBACK_REPLY = (
    'Here you go: {"ats_score": 85, "ats_friendliness": "Good", '
    '"strengths": ["clear formatting"], "weaknesses": [], '
    '"recommendations": ["add metrics"]} thanks'
)


class FakeAIClient(AIClient):
    """Records every prompt sent to the provider instead of calling it."""

    def __init__(self, settings: Settings, reply: Union[str, Exception] = VALID_FEEDBACK_REPLY):
        super().__init__(settings)
        self.reply = reply
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.ensure_configured()
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


class FakeMailer(Mailer):
    """Collects outgoing mail; set fail=True to simulate an SMTP outage."""

    def __init__(self, settings: Settings, fail: bool = False):
        super().__init__(settings)
        self.fail = fail
        self.sent: List[Tuple[str, str, str]] = []

    def send_html(self, to: str, subject: str, html: str) -> None:
        if self.fail:
            raise EmailDeliveryError(details="SMTP unavailable")
        self.sent.append((to, subject, html))


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        mail_user="jobs@example.com",
        mail_pass="secret",
        digest_enabled=False,
    )


@pytest.fixture
def unconfigured_settings():
    return Settings(_env_file=None, gemini_api_key="", digest_enabled=False)


@pytest.fixture
def mongo_db():
    return mongomock.MongoClient().db


@pytest.fixture
def job_service(mongo_db):
    return JobService(mongo_db["jobs"])


@pytest.fixture
def subscriber_service(mongo_db):
    return SubscriberService(mongo_db["subscribers"])


@pytest.fixture
def fake_ai(settings):
    return FakeAIClient(settings)


@pytest.fixture
def fake_mailer(settings):
    return FakeMailer(settings)


@pytest.fixture
def client(settings, job_service, subscriber_service, fake_ai, fake_mailer):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_job_service] = lambda: job_service
    app.dependency_overrides[get_subscriber_service] = lambda: subscriber_service
    app.dependency_overrides[get_ai_client] = lambda: fake_ai
    app.dependency_overrides[get_mailer] = lambda: fake_mailer
    yield TestClient(app)
    app.dependency_overrides.clear()
