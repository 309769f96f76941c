"""Test suite entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from simple_api_tester.value_chaining.json_values import JsonValue

DEFAULT_TIMEOUT_SECONDS = 30


class HttpMethod(str, Enum):
    """HTTP methods a test case may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @property
    def sends_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True)
class TestCase:  # pylint: disable=too-many-instance-attributes
    """One declarative HTTP request and its expectations."""

    __test__ = False

    name: str
    order: int
    endpoint: str
    method: HttpMethod
    headers: Mapping[str, str] = field(default_factory=dict)
    body: JsonValue = None
    params: Mapping[str, str] = field(default_factory=dict)
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    expected_status_code: int | None = None
    expected_response: JsonValue = None
    extract: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TestSuite:
    """Ordered test cases loaded from one suite file."""

    __test__ = False

    path: Path
    test_cases: tuple[TestCase, ...]
