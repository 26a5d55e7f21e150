"""Notifier that invokes the hosted e-mail function over HTTP."""

from __future__ import annotations

import httpx

from portal.application.notifications import NotificationKind, Notifier
from portal.domain.exceptions import NotificationError


class HttpNotifier(Notifier):

    def __init__(
        self,
        url: str,
        token: str = "",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = client or httpx.Client(timeout=timeout)
        self._headers = headers

    def send(self, kind: NotificationKind, data: dict[str, object]) -> None:
        try:
            response = self._client.post(
                self._url,
                json={"type": kind.value, "data": data},
                headers=self._headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NotificationError(f"{kind.value}: {exc}") from exc
