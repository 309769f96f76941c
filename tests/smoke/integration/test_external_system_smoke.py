"""Smoke tests against a local HTTP server."""

from __future__ import annotations

import json
import threading
import time
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest
from click.testing import CliRunner
from simple_api_tester.cli import cli


class _ApiHandler(BaseHTTPRequestHandler):
    def do_POST(self) -> None:  # noqa: N802
        length = int(self.headers.get("Content-Length", "0"))
        payload = json.loads(self.rfile.read(length) or b"{}")
        if self.path == "/auth/login" and payload.get("username") == "qa":
            self._reply(200, {"status": "success", "data": {"access_token": "smoke-token"}})
        else:
            self._reply(401, {"status": "error"})

    def do_GET(self) -> None:  # noqa: N802
        if self.path.startswith("/slow"):
            time.sleep(1.5)
            self._reply(200, {})
        elif self.headers.get("Authorization") == "Bearer smoke-token":
            self._reply(200, {"name": "qa", "roles": ["admin"]})
        else:
            self._reply(401, {"status": "error"})

    def _reply(self, status: int, payload: object) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


@pytest.fixture
def base_url(monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    for name in ("NO_PROXY", "no_proxy"):
        monkeypatch.setenv(name, "127.0.0.1,localhost")
    server = ThreadingHTTPServer(("127.0.0.1", 0), _ApiHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_smoke_run_against_local_server(tmp_path: Path, base_url: str) -> None:
    suite_path = tmp_path / "suite.yaml"
    suite_path.write_text(
        """
test_case:
  - test_case_name: "Login"
    order: 1
    api: "/auth/login"
    method: "POST"
    body:
      username: "qa"
    expected_status_code: 200
    expected_response:
      status: "success"
    extract:
      token: "data.access_token"
  - test_case_name: "Profile"
    order: 2
    api: "/users/me"
    method: "GET"
    headers:
      Authorization: "Bearer {{token}}"
    expected_status_code: 200
    expected_response:
      roles: ["admin"]
""",
        encoding="utf-8",
    )
    output_path = tmp_path / "results.json"

    result = CliRunner().invoke(
        cli,
        ["run", str(suite_path), "--base-url", base_url, "--output", str(output_path)],
    )

    assert result.exit_code == 0, result.output
    report = json.loads(output_path.read_text(encoding="utf-8"))
    assert report["summary"] == {"total": 2, "passed": 2, "failed": 0}
    assert all(entry["response_time_ms"] > 0 for entry in report["results"])


def test_smoke_timeout_is_reported_as_failure(tmp_path: Path, base_url: str) -> None:
    suite_path = tmp_path / "suite.json"
    suite_path.write_text(
        json.dumps(
            {
                "test_case": [
                    {
                        "test_case_name": "Slow",
                        "api": "/slow",
                        "method": "GET",
                        "timeout": 1,
                    }
                ]
            }
        ),
        encoding="utf-8",
    )
    output_path = tmp_path / "results.json"

    result = CliRunner().invoke(
        cli,
        ["run", str(suite_path), "--base-url", base_url, "--output", str(output_path)],
    )

    assert result.exit_code == 1
    (entry,) = json.loads(output_path.read_text(encoding="utf-8"))["results"]
    assert entry["status"] == "FAILED"
    assert entry["response_status_code"] == 0
    assert entry["errors"][0].startswith("Request failed: timeout after 1s")
