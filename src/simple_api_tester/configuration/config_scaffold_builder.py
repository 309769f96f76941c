"""Test suite scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "test_cases.yaml"

_SUITE_SCAFFOLD_TEMPLATE = """# Test suite template for simple-api-tester.
# Test cases run in ascending `order`. Replace the sample endpoints and values
# with the ones of the service under test; JSON files with the same keys work too.
# Values extracted from a response are available to later test cases as {{name}}.

test_case:
  - test_case_name: "Login"
    order: 1
    api: "/auth/login"
    # One of GET, POST, PUT, DELETE, PATCH.
    method: "POST"
    headers:
      Content-Type: "application/json"
    # The body is only sent for POST, PUT and PATCH.
    body:
      username: "<REQUIRED>"
      password: "<REQUIRED>"
    # Seconds; 0 or omitted means 30.
    timeout: 30
    expected_status_code: 200
    # Partial match: only the keys listed here are checked.
    expected_response:
      status: "success"
    # variable name -> dot path into the response body (array indices allowed).
    extract:
      token: "data.access_token"

  - test_case_name: "Fetch profile"
    order: 2
    api: "/users/me"
    method: "GET"
    headers:
      Authorization: "Bearer {{token}}"
    params:
      include: "<OPTIONAL>"
    expected_status_code: 200
"""


def build_placeholder_configuration() -> str:
    """Build a YAML test suite template with placeholders and inline guidance."""
    return _SUITE_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder test suite template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Test suite file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
