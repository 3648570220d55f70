"""
Unit tests for notification sinks.
"""

import unittest
from urllib.parse import parse_qs

import httpx

from staybook.config import Settings
from staybook.services.notifications import (
    MAILGUN_EU_BASE,
    LogNotificationSink,
    MailgunNotificationSink,
    MemoryNotificationSink,
    get_notification_sink,
)


def _settings(**overrides):
    values = {
        "mailgun_api_key": "key-123",
        "mailgun_domain": "mg.staybook.io",
        "mailgun_from_email": "hello@staybook.io",
        "notification_recipient": "ops@staybook.io",
    }
    values.update(overrides)
    return Settings(**values)


class TestSimpleSinks(unittest.TestCase):
    def test_memory_sink_keeps_order(self):
        sink = MemoryNotificationSink()
        self.assertIsNone(sink.last)
        sink.notify("first", "one")
        sink.notify("second", "two")
        self.assertEqual([n.title for n in sink.notifications], ["first", "second"])
        self.assertEqual(sink.last.description, "two")

    def test_log_sink(self):
        with self.assertLogs("staybook.services.notifications", level="INFO") as logs:
            self.assertTrue(LogNotificationSink().notify("Hello", "World"))
        self.assertIn("Hello - World", logs.output[0])

    def test_factory(self):
        self.assertIsInstance(get_notification_sink(_settings(notification_backend="log")), LogNotificationSink)
        self.assertIsInstance(get_notification_sink(_settings(notification_backend="Memory")), MemoryNotificationSink)
        self.assertIsInstance(get_notification_sink(_settings(notification_backend="mailgun")), MailgunNotificationSink)
        with self.assertRaises(ValueError):
            get_notification_sink(_settings(notification_backend="pigeon"))


class TestMailgunSink(unittest.TestCase):
    def _sink(self, handler, **overrides):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(record))
        return MailgunNotificationSink(_settings(**overrides), client=client)

    def test_sends_message(self):
        sink = self._sink(lambda request: httpx.Response(200, json={"id": "<1@mg>"}))
        self.assertTrue(sink.notify("Listing submitted for review", "Cozy cottage"))
        (request,) = self.requests
        self.assertEqual(str(request.url), "https://api.mailgun.net/v3/mg.staybook.io/messages")
        form = parse_qs(request.content.decode())
        self.assertEqual(form["to"], ["ops@staybook.io"])
        self.assertEqual(form["subject"], ["[Staybook] Listing submitted for review"])
        self.assertEqual(form["text"], ["Cozy cottage"])
        # sender rewritten to the sending domain
        self.assertEqual(form["from"], ["Staybook <noreply@mg.staybook.io>"])

    def test_unconfigured_sends_nothing(self):
        sink = self._sink(lambda request: httpx.Response(200), notification_recipient="")
        with self.assertLogs("staybook.services.notifications", level="WARNING"):
            self.assertFalse(sink.notify("t", "d"))
        self.assertEqual(self.requests, [])

    def test_api_failure(self):
        sink = self._sink(lambda request: httpx.Response(500, text="boom"))
        with self.assertLogs("staybook.services.notifications", level="WARNING"):
            self.assertFalse(sink.notify("t", "d"))

    def test_retries_eu_endpoint_on_401(self):
        def handler(request):
            if request.url.host == "api.mailgun.net":
                return httpx.Response(401)
            return httpx.Response(200)

        sink = self._sink(handler)
        self.assertTrue(sink.notify("t", "d"))
        self.assertEqual(len(self.requests), 2)
        self.assertTrue(str(self.requests[1].url).startswith(MAILGUN_EU_BASE))

    def test_network_error_is_not_raised(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        sink = self._sink(handler)
        with self.assertLogs("staybook.services.notifications", level="WARNING"):
            self.assertFalse(sink.notify("t", "d"))


if __name__ == "__main__":
    unittest.main()
