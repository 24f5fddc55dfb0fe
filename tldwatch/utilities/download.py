"""Download utilities for the IANA TLD list."""

import logging
import time
from contextlib import contextmanager
from typing import Iterator

import httpx

from ..config import REQUEST_TIMEOUT, TLD_LIST_URL
from ..errors import FetchError


@contextmanager
def open_tld_list(
    logger: logging.Logger,
    url: str = TLD_LIST_URL,
    timeout: float = REQUEST_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> Iterator[Iterator[str]]:
    """
    Open the TLD list and yield its body line by line.

    A single GET is made, without retries. ``timeout`` is used both as the
    httpx timeout and as a deadline for the whole fetch, so a server that
    trickles the body still fails in bounded time. The response is closed
    when the block exits, however it exits.

    Args:
        logger: Logger for close failures
        url: URL of the newline-delimited TLD list
        timeout: Seconds allowed for the whole fetch
        transport: Optional httpx transport (used by tests)

    Yields:
        Iterator over the lines of the response body

    Raises:
        FetchError: On bad URL, network error, HTTP error status, timeout or
            deadline exceeded
    """
    deadline = time.monotonic() + timeout

    with httpx.Client(timeout=timeout, follow_redirects=True, transport=transport) as client:
        try:
            request = client.build_request("GET", url)
        except httpx.InvalidURL as e:
            raise FetchError(f"failed to create request: {e}") from e

        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise FetchError(f"failed to get: {e}") from e

        try:
            if response.is_error:
                raise FetchError(f"failed to get: HTTP {response.status_code} for {url}")
            yield _iter_lines(response, deadline)
        finally:
            _close_response(response, logger)


# =============================================================================
# Internal Implementation
# =============================================================================


def _iter_lines(response: httpx.Response, deadline: float) -> Iterator[str]:
    """Yield body lines, failing once the fetch deadline has passed."""
    try:
        for line in response.iter_lines():
            if time.monotonic() > deadline:
                raise FetchError("failed to get: deadline exceeded")
            yield line
    except httpx.HTTPError as e:
        raise FetchError(f"failed to read body: {e}") from e

    # The body may end after the deadline without yielding another line
    if time.monotonic() > deadline:
        raise FetchError("failed to get: deadline exceeded")


def _close_response(response: httpx.Response, logger: logging.Logger) -> None:
    try:
        response.close()
    except (httpx.HTTPError, OSError) as e:
        logger.error("failed to close body", extra={"err": str(e)})
