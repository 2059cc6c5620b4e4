"""Fakes for the ``requests`` layer used by HttpFactService."""
import json
from typing import Any, List, Optional

import requests


class FakeHttpResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        # json.JSONDecodeError is a ValueError, like requests' own decode error
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Hands out queued responses (or raises queued exceptions) and records calls."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: List[dict] = []

    def get(self, url: str, timeout: Optional[float] = None) -> FakeHttpResponse:
        self.calls.append({"url": url, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result
