"""Module I: Notification sinks (log, Mailgun email, in-memory).

A sink surfaces the confirmation of an accepted submission. It is only ever
called after a submission is accepted; delivery problems are logged and
reported as ``False``, never raised back into the submission flow.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from staybook.config import Settings, get_settings

logger = logging.getLogger(__name__)

MAILGUN_US_BASE = "https://api.mailgun.net"
MAILGUN_EU_BASE = "https://api.eu.mailgun.net"


class NotificationSink(Protocol):
    def notify(self, title: str, description: str) -> bool:
        ...


@dataclass(frozen=True)
class Notification:
    title: str
    description: str


class LogNotificationSink:
    def notify(self, title: str, description: str) -> bool:
        logger.info("[Notify] %s - %s", title, description)
        return True


class MemoryNotificationSink:
    """Keeps every notification in order; used for previews and tests."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, title: str, description: str) -> bool:
        self.notifications.append(Notification(title=title, description=description))
        return True

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None


class MailgunNotificationSink:
    """Emails each confirmation to ``notification_recipient`` through the Mailgun messages API."""

    def __init__(self, settings: Settings | None = None, client: httpx.Client | None = None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def configured(self) -> bool:
        s = self.settings
        return bool(s.mailgun_api_key and s.mailgun_domain and s.notification_recipient)

    def _from_address(self) -> str:
        s = self.settings
        domain = s.mailgun_domain.lower()
        from_addr = s.mailgun_from_email
        from_domain = from_addr.split("@")[-1].lower() if "@" in from_addr else ""
        if domain and from_domain != domain:
            # Mailgun only delivers when the sender matches the sending domain
            from_addr = f"noreply@{domain}"
        return f"{s.mailgun_from_name} <{from_addr}>"

    def _post(self, client: httpx.Client, base: str, data: dict) -> httpx.Response:
        url = f"{base}/v3/{self.settings.mailgun_domain.lower()}/messages"
        return client.post(url, auth=("api", self.settings.mailgun_api_key), data=data)

    def notify(self, title: str, description: str) -> bool:
        s = self.settings
        if not self.configured:
            logger.warning(
                "[Mailgun] NOT SENT: %s. MAILGUN_API_KEY=%s MAILGUN_DOMAIN=%s NOTIFICATION_RECIPIENT=%s",
                title,
                "set" if s.mailgun_api_key else "MISSING",
                "set" if s.mailgun_domain else "MISSING",
                "set" if s.notification_recipient else "MISSING",
            )
            return False
        data = {
            "from": self._from_address(),
            "to": s.notification_recipient,
            "subject": f"[{s.app_name}] {title}",
            "text": description,
        }
        base = (s.mailgun_base_url or MAILGUN_US_BASE).rstrip("/")
        client = self._client or httpx.Client(timeout=s.mailgun_timeout_seconds)
        try:
            r = self._post(client, base, data)
            if r.status_code == 401 and base == MAILGUN_US_BASE:
                logger.info("[Mailgun] 401 with US endpoint. Retrying with EU endpoint")
                r = self._post(client, MAILGUN_EU_BASE, data)
            if 200 <= r.status_code < 300:
                logger.info("[Mailgun] Sent: subject=%s status=%s", data["subject"], r.status_code)
                return True
            logger.warning("[Mailgun] API failed: status=%s body=%s", r.status_code, r.text[:500])
            return False
        except httpx.HTTPError as e:
            logger.warning("[Mailgun] Request error: %s: %s", type(e).__name__, e)
            return False
        finally:
            if self._client is None:
                client.close()


def get_notification_sink(settings: Settings | None = None) -> NotificationSink:
    settings = settings or get_settings()
    backend = settings.notification_backend
    if backend == "log":
        return LogNotificationSink()
    if backend == "memory":
        return MemoryNotificationSink()
    if backend == "mailgun":
        return MailgunNotificationSink(settings)
    raise ValueError(f"Unknown notification backend: {backend!r}")
