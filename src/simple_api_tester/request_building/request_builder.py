"""Request assembly from test case definitions and chained variables."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from simple_api_tester.configuration.suite_models import HttpMethod, TestCase
from simple_api_tester.value_chaining.variable_store import VariableStore

_HEADER_NAME_PATTERN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_JSON_CONTENT_TYPE = "application/json"


class BodyPreparationError(Exception):
    """Raised when a request body cannot be serialized."""


class RequestConstructionError(Exception):
    """Raised when the method, URL or headers do not form a valid request."""


@dataclass(frozen=True)
class PreparedRequest:
    """Fully resolved request ready to hand to a transport."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None


def build_url(test_case: TestCase, base_url: str, store: VariableStore) -> str:
    """Substitute the endpoint and prefix it with the (already normalized) base URL."""
    endpoint = store.substitute(test_case.endpoint)
    if not base_url:
        return endpoint
    return base_url + endpoint


def build_headers(test_case: TestCase, store: VariableStore) -> dict[str, str]:
    return store.substitute_values(test_case.headers)


def build_query(test_case: TestCase, store: VariableStore) -> str:
    """Return the URL-encoded query string of the substituted params, keys sorted."""
    params = store.substitute_values(test_case.params)
    return urlencode(sorted(params.items()))


def append_query(url: str, query: str) -> str:
    """Merge an encoded query string into whatever query ``url`` already carries."""
    if not query:
        return url
    parts = urlsplit(url)
    merged = parse_qsl(parts.query, keep_blank_values=True) + parse_qsl(
        query, keep_blank_values=True
    )
    merged.sort(key=lambda item: item[0])
    return urlunsplit(parts._replace(query=urlencode(merged)))


def build_body(test_case: TestCase, method: HttpMethod, store: VariableStore) -> bytes | None:
    """Serialize the substituted body for methods that carry one.

    Raises:
      BodyPreparationError: If the body holds values JSON cannot represent.
    """
    if test_case.body is None or not method.sends_body:
        return None
    resolved = store.substitute_deep(test_case.body)
    try:
        text = json.dumps(
            resolved,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise BodyPreparationError(f"failed to marshal body: {exc}") from exc
    return text.encode("utf-8")


def prepare_request(
    test_case: TestCase,
    *,
    url: str,
    body: bytes | None,
    store: VariableStore,
) -> PreparedRequest:
    """Combine URL, query, headers and body into a validated request.

    Raises:
      RequestConstructionError: If the URL or a header is malformed.
    """
    full_url = append_query(url, build_query(test_case, store))
    _validate_url(full_url)

    headers = build_headers(test_case, store)
    for name, value in headers.items():
        _validate_header(name, value)
    if body is not None and not _has_header(headers, "content-type"):
        headers["Content-Type"] = _JSON_CONTENT_TYPE

    return PreparedRequest(
        method=test_case.method.value,
        url=full_url,
        headers=headers,
        body=body,
    )


def _validate_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise RequestConstructionError(f"failed to create request: {exc}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise RequestConstructionError(
            f"failed to create request: URL '{url}' must be absolute http(s); "
            "set a base URL or use a full endpoint"
        )


def _validate_header(name: str, value: str) -> None:
    if not _HEADER_NAME_PATTERN.fullmatch(name):
        raise RequestConstructionError(f"failed to create request: invalid header name '{name}'")
    if "\r" in value or "\n" in value or "\x00" in value:
        raise RequestConstructionError(
            f"failed to create request: invalid value for header '{name}'"
        )


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(key.lower() == name for key in headers)
