"""Fact retrieval.

``FactService`` is the one capability the HTTP layer needs. The app is handed an
implementation explicitly: ``HttpFactService`` for the real upstream, or
``StaticFactService`` when a test wants a fixed answer without the network.
"""
import logging
from typing import Optional, Protocol

import requests

from .models import Fact

logger = logging.getLogger(__name__)


class FactService(Protocol):
    def get_fact(self) -> Fact:
        ...


class HttpFactService:
    """Fetches a fresh fact from the upstream API on every call.

    Errors are not caught: connection problems and non-2xx answers raise
    ``requests.RequestException`` subclasses, a body that is not JSON raises
    ``ValueError`` and JSON of the wrong shape raises
    ``pydantic.ValidationError``.
    """

    def __init__(
        self,
        url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_fact(self) -> Fact:
        logger.debug("GET %s", self.url)
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        fact = Fact.model_validate(response.json())
        logger.debug("Upstream returned a fact (%d chars)", len(fact.fact))
        return fact


class StaticFactService:
    """Returns the same fact every time and never touches the network."""

    def __init__(self, fact: Fact) -> None:
        self.fact = fact
        self.calls = 0

    def get_fact(self) -> Fact:
        self.calls += 1
        return self.fact
