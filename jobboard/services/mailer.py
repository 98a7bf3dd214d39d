"""
Outbound email over SMTP (Gmail by default).

Sends are blocking; async callers run them in the threadpool.
"""

import smtplib
from email.message import EmailMessage
from email.utils import formataddr
from html import escape
from typing import Iterable

from jobboard.core.config import Settings
from jobboard.core.errors import EmailDeliveryError
from jobboard.core.logging import get_logger

logger = get_logger(__name__)


CONFIRMATION_SUBJECT = "Subscription Confirmed - Freshers Jobs Updates"
DIGEST_SUBJECT = "Daily Freshers Jobs Updates"


def render_confirmation_html() -> str:
    return """
        <h2>Welcome to FreshersJobs.shop</h2>
        <p>Hi there,</p>
        <p>Thanks for subscribing!</p>
        <p>You'll now receive <b>daily job updates</b> (last 24 hours) directly in your inbox.</p>
        <br/>
        <p>Stay tuned for the latest <b>Freshers Jobs &amp; Internships</b>.</p>
        <br/>
        <p style="font-size:12px;color:gray;">
          If this wasn't you, you can ignore this email.
        </p>
    """


def render_job_item(job: dict) -> str:
    return '<li><a href="{url}">{title} at {company}</a> ({location})</li>'.format(
        url=escape(str(job.get("applyUrl") or ""), quote=True),
        title=escape(str(job.get("title") or "")),
        company=escape(str(job.get("company") or "")),
        location=escape(str(job.get("location") or "")),
    )


def render_digest_html(jobs: Iterable[dict], site_url: str) -> str:
    """Digest body: one linked line per job, newest first as given."""
    items = "".join(render_job_item(job) for job in jobs)
    site = escape(site_url, quote=True)
    return f"""
        <h3>Latest Jobs (Last 24 Hours)</h3>
        <ul>{items}</ul>
        <p>Visit <a href="{site}">{site}</a> for more.</p>
    """


class Mailer:
    """SMTP sender built from Settings."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def sender(self) -> str:
        return formataddr((self.settings.mail_sender_name, self.settings.mail_user))

    def _connect(self) -> smtplib.SMTP:
        smtp = smtplib.SMTP(self.settings.mail_host, self.settings.mail_port, timeout=30)
        smtp.starttls()
        smtp.login(self.settings.mail_user, self.settings.mail_pass)
        return smtp

    def send_html(self, to: str, subject: str, html: str) -> None:
        """
        Send one HTML email.

        Raises:
            EmailDeliveryError on any SMTP failure
        """
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content("This message requires an HTML capable mail client.")
        msg.add_alternative(html, subtype="html")

        try:
            with self._connect() as smtp:
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send '{subject}' to {to}: {e}")
            raise EmailDeliveryError(details=str(e)) from e
        logger.info(f"Sent '{subject}' to {to}")

    def send_confirmation(self, to: str) -> None:
        self.send_html(to, CONFIRMATION_SUBJECT, render_confirmation_html())

    def send_digest(self, to: str, jobs: Iterable[dict]) -> None:
        self.send_html(to, DIGEST_SUBJECT, render_digest_html(jobs, self.settings.site_url))

    def verify(self) -> bool:
        """Log in once to check the SMTP credentials. Never raises."""
        if not self.settings.mail_configured:
            logger.warning("MAIL_USER / MAIL_PASS missing; email sending disabled")
            return False
        try:
            with self._connect() as smtp:
                smtp.noop()
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP Error: {e}")
            return False
        logger.info("SMTP server is ready to send messages")
        return True
