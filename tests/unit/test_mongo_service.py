"""Test job and subscriber storage timestamps."""
from datetime import datetime, timezone

import pytest

from jobboard.core.errors import ConflictError


def test_insert_stamps_posted_at_in_utc(job_service):
    before = datetime.now(timezone.utc)
    doc = job_service.insert({"title": "SDE Intern", "company": "Acme"})
    assert doc["postedAt"].tzinfo is timezone.utc
    assert before <= doc["postedAt"] <= datetime.now(timezone.utc)


def test_insert_keeps_given_posted_at(job_service):
    posted = datetime(2024, 1, 1)
    assert job_service.insert({"title": "T", "company": "C", "postedAt": posted})["postedAt"] == posted


def test_subscriber_records_subscribed_at(subscriber_service):
    subscriber_service.insert("a@example.com")
    stored = subscriber_service.collection.find_one({"email": "a@example.com"})
    assert isinstance(stored["subscribedAt"], datetime)


def test_duplicate_subscriber_conflicts(subscriber_service):
    subscriber_service.insert("a@example.com")
    with pytest.raises(ConflictError):
        subscriber_service.insert("a@example.com")
