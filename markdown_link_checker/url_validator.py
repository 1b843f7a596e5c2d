"""Probe every link with a HEAD request and record what came back."""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

import httpx

USER_AGENT = "MarkdownLinkChecker/1.0"
DEFAULT_TIMEOUT = 5.0
NETWORK_ERROR = "Network Error"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of probing a single URL.

    ``status_code`` is 0 when no response was received; ``status_text`` then
    holds a failure label instead of a reason phrase.
    """
    url: str
    status_code: int
    status_text: str
    succeeded: bool

    @property
    def is_network_failure(self) -> bool:
        return self.status_code == 0

    @classmethod
    def from_response(cls, url: str, response: httpx.Response) -> ProbeOutcome:
        return cls(
            url=url,
            status_code=response.status_code,
            status_text=response.reason_phrase,
            succeeded=200 <= response.status_code <= 299,
        )

    @classmethod
    def from_error(cls, url: str, label: str) -> ProbeOutcome:
        return cls(url=url, status_code=0, status_text=label or NETWORK_ERROR, succeeded=False)


def build_client(
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the client shared by every probe of a run.

    The pool is unbounded so that no probe waits on another for a connection.
    """
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=None),
        transport=transport,
    )


async def check_url(client: httpx.AsyncClient, url: str) -> ProbeOutcome:
    """Send one HEAD request and turn whatever happens into a ProbeOutcome."""
    start = time.perf_counter()
    try:
        response = await client.head(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        # The exception class name is the failure label, e.g. ConnectError
        outcome = ProbeOutcome.from_error(url, type(e).__name__)
        logger.warning(
            f"Error checking URL {url}: {e!r}",
            extra={"url": url, "error": outcome.status_text},
        )
        return outcome
    except Exception:
        logger.exception(f"Unexpected error checking URL {url}", extra={"url": url})
        return ProbeOutcome.from_error(url, NETWORK_ERROR)

    outcome = ProbeOutcome.from_response(url, response)
    logger.info(
        f"URL {url} returned status code {outcome.status_code}",
        extra={
            "url": url,
            "status_code": outcome.status_code,
            "elapsed_s": round(time.perf_counter() - start, 3),
        },
    )
    return outcome


async def validate_urls(
    urls: Iterable[str],
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[ProbeOutcome]:
    """Probe all URLs concurrently.

    Args:
        urls: Links to check
        timeout: Per-request timeout in seconds
        transport: Transport override for the shared client (optional)

    Returns:
        One outcome per URL, in the same order as ``urls``
    """
    urls = list(urls)
    if not urls:
        return []

    async with build_client(timeout=timeout, transport=transport) as client:
        tasks = [check_url(client, u) for u in urls]
        return list(await asyncio.gather(*tasks))


def check_links(
    urls: Iterable[str],
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[ProbeOutcome]:
    """Blocking wrapper around :func:`validate_urls`."""
    return asyncio.run(validate_urls(urls, timeout=timeout, transport=transport))
