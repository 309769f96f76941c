"""Blocking HTTP transport with timing capture."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import Protocol

import httpx

_LOGGER = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when no response arrives (connection failure, timeout, protocol error)."""

    def __init__(self, message: str, *, elapsed_ms: float = 0.0) -> None:
        super().__init__(message)
        self.elapsed_ms = elapsed_ms


class ResponseReadError(Exception):
    """Raised when the response headers arrived but the body could not be read."""

    def __init__(self, message: str, *, elapsed_ms: float = 0.0, status_code: int = 0) -> None:
        super().__init__(message)
        self.elapsed_ms = elapsed_ms
        self.status_code = status_code


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of one HTTP exchange."""

    status_code: int
    body: bytes
    elapsed_ms: float


class HttpTransport(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for transports used by the test executor."""

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None,
        timeout: float,
    ) -> TransportResponse: ...


class HttpxTransport:
    """Real transport backed by one ``httpx.Client`` per run.

    Redirects are followed. ``timeout`` bounds the whole exchange: httpx
    enforces it per connect/read/write operation and the body read is
    additionally cut off once the overall deadline has passed.
    """

    def __init__(self, *, transport: httpx.BaseTransport | None = None) -> None:
        self._client = httpx.Client(follow_redirects=True, transport=transport)

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if not self._client.is_closed:
            self._client.close()

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None,
        timeout: float,
    ) -> TransportResponse:
        """Send one request and read the full body.

        Header values are sent as UTF-8 bytes. Elapsed time covers the request
        up to the response headers, matching what a user perceives as server
        latency.

        Raises:
          TransportError: If the request cannot be built or sent, or times out.
          ResponseReadError: If reading the response body fails or runs past
            the deadline.
        """
        start_time = time.perf_counter()
        deadline = start_time + timeout
        try:
            request = self._client.build_request(
                method,
                url,
                headers={name: value.encode("utf-8") for name, value in headers.items()},
                content=body,
                timeout=httpx.Timeout(timeout),
            )
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            raise TransportError(f"Request failed: invalid request: {exc}") from exc

        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request failed: timeout after {timeout:g}s ({exc})",
                elapsed_ms=_elapsed_ms(start_time),
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Request failed: {exc}",
                elapsed_ms=_elapsed_ms(start_time),
            ) from exc
        elapsed_ms = _elapsed_ms(start_time)

        try:
            payload = _read_until(response, deadline, timeout, elapsed_ms)
        finally:
            response.close()

        _LOGGER.debug(
            "%s %s -> %s (%d bytes, %.1fms)",
            method,
            url,
            response.status_code,
            len(payload),
            elapsed_ms,
        )
        return TransportResponse(
            status_code=response.status_code,
            body=payload,
            elapsed_ms=elapsed_ms,
        )


def _read_until(
    response: httpx.Response, deadline: float, timeout: float, elapsed_ms: float
) -> bytes:
    chunks: list[bytes] = []
    try:
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            if time.perf_counter() > deadline:
                raise ResponseReadError(
                    f"failed to read response: timeout after {timeout:g}s",
                    elapsed_ms=elapsed_ms,
                    status_code=response.status_code,
                )
    except httpx.HTTPError as exc:
        raise ResponseReadError(
            f"failed to read response: {exc}",
            elapsed_ms=elapsed_ms,
            status_code=response.status_code,
        ) from exc
    return b"".join(chunks)


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 3)
