"""
Daily Digest - emails every subscriber the jobs posted in the last 24 hours.

Runs once a day at settings.digest_hour:digest_minute (server local time)
from an asyncio task started with the app. A failed run is logged and the
loop waits for the next day; nothing is retried.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

from jobboard.core.config import Settings
from jobboard.core.errors import EmailDeliveryError
from jobboard.core.logging import get_logger
from jobboard.services.mailer import Mailer
from jobboard.services.mongo_service import JobService, SubscriberService, get_mongo_services

logger = get_logger(__name__)

DIGEST_WINDOW = timedelta(hours=24)


def send_daily_digest(
    jobs: JobService,
    subscribers: SubscriberService,
    mailer: Mailer,
    now: Optional[datetime] = None,
) -> int:
    """
    Send the digest for the 24 hours before `now`.

    Returns:
        Number of subscribers mailed (0 when there were no new jobs)
    """
    now = now or datetime.now(timezone.utc)
    recent = jobs.posted_since(now - DIGEST_WINDOW)
    if not recent:
        logger.info("No new jobs in last 24h.")
        return 0

    sent = 0
    for email in subscribers.list_emails():
        try:
            mailer.send_digest(email, recent)
            sent += 1
        except EmailDeliveryError:
            # Already logged by the mailer; keep going with the others
            continue

    logger.info(f"Sent {len(recent)} job updates to {sent} subscribers")
    return sent


def seconds_until(hour: int, minute: int, now: datetime) -> float:
    """Delay from `now` to the next hour:minute (today or tomorrow)."""
    target = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if target <= now:
        target += timedelta(days=1)
    return (target - now).total_seconds()


async def run_daily_digest_loop(settings: Settings) -> None:
    """Sleep until the configured time, send, repeat. Cancel to stop."""
    loop = asyncio.get_running_loop()
    while True:
        delay = seconds_until(settings.digest_hour, settings.digest_minute, datetime.now())
        logger.info(f"Next daily digest in {delay / 3600:.1f}h")
        await asyncio.sleep(delay)

        try:
            services = get_mongo_services()
            await loop.run_in_executor(
                None,
                lambda: send_daily_digest(services["jobs"], services["subscribers"], Mailer(settings)),
            )
        except Exception:
            logger.exception("Daily digest run failed")
