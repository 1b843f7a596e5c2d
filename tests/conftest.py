"""Shared fixtures for the Markdown Link Checker test suite."""

from typing import Callable, Dict

import httpx
import pytest


@pytest.fixture
def routed_transport() -> Callable[[Dict[str, object]], httpx.MockTransport]:
    """Build a MockTransport answering per URL.

    Each route maps a URL to either a status code or an exception instance
    to raise. Unrouted URLs answer 200. Every request seen is recorded on
    ``transport.requests``.
    """
    def factory(routes: Dict[str, object]) -> httpx.MockTransport:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            answer = routes.get(str(request.url), 200)
            if isinstance(answer, Exception):
                raise answer
            return httpx.Response(answer)

        transport = httpx.MockTransport(handler)
        transport.requests = seen
        return transport

    return factory
