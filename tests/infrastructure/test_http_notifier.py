"""Tests for the HTTP notifier using httpx's mock transport."""

import json

import httpx
import pytest

from portal.application.notifications import NotificationKind
from portal.domain.exceptions import NotificationError
from portal.infrastructure.notifications.http_notifier import HttpNotifier


def _notifier(handler, token: str = "secret") -> HttpNotifier:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpNotifier("https://functions.example/send-email", token=token, client=client)


class TestHttpNotifier:

    def test_posts_type_and_data(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        _notifier(handler).send(NotificationKind.NEW_ORDER, {"order_number": "ORD-1-1"})

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://functions.example/send-email"
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.content) == {"type": "new_order", "data": {"order_number": "ORD-1-1"}}

    def test_no_token_no_auth_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(204)

        _notifier(handler, token="").send(NotificationKind.NEW_TICKET, {})
        assert "Authorization" not in seen[0].headers

    def test_server_error_raises_notification_error(self):
        notifier = _notifier(lambda request: httpx.Response(500))
        with pytest.raises(NotificationError, match="order_status"):
            notifier.send(NotificationKind.ORDER_STATUS, {})

    def test_transport_error_raises_notification_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NotificationError, match="connection refused"):
            _notifier(handler).send(NotificationKind.NEW_ORDER, {})
