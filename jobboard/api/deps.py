"""
FastAPI dependencies.

Everything a route needs (settings, collections, AI client, mailer) is
injected here, so tests can swap any of them via app.dependency_overrides.
"""

from fastapi import Depends

from jobboard.core.config import Settings, get_settings
from jobboard.services.ai_client import AIClient
from jobboard.services.mailer import Mailer
from jobboard.services.mongo_service import JobService, SubscriberService


def get_job_service() -> JobService:
    return JobService()


def get_subscriber_service() -> SubscriberService:
    return SubscriberService()


def get_ai_client(settings: Settings = Depends(get_settings)) -> AIClient:
    return AIClient(settings)


def get_mailer(settings: Settings = Depends(get_settings)) -> Mailer:
    return Mailer(settings)
