"""Test suite scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from simple_api_tester.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from simple_api_tester.configuration.loader import load_test_suite, parse_test_cases
from simple_api_tester.configuration.suite_models import HttpMethod


def test_placeholder_configuration_is_a_loadable_suite() -> None:
    document = yaml.safe_load(build_placeholder_configuration())

    login, profile = parse_test_cases(document)

    assert login.method is HttpMethod.POST
    assert login.extract == {"token": "data.access_token"}
    assert profile.headers["Authorization"] == "Bearer {{token}}"
    assert login.order < profile.order


def test_placeholder_configuration_marks_required_and_optional_values() -> None:
    content = build_placeholder_configuration()

    assert content.startswith("# Test suite template for simple-api-tester.")
    assert "<REQUIRED>" in content
    assert "<OPTIONAL>" in content


def test_write_placeholder_configuration(tmp_path: Path) -> None:
    destination = tmp_path / "test_cases.yaml"

    written = write_placeholder_configuration(destination)

    assert written == destination.resolve()
    assert len(load_test_suite(written).test_cases) == 2


def test_write_placeholder_configuration_refuses_to_overwrite(tmp_path: Path) -> None:
    destination = tmp_path / "test_cases.yaml"
    destination.write_text("keep me", encoding="utf-8")

    with pytest.raises(FileExistsError, match="already exists"):
        write_placeholder_configuration(destination)
    assert destination.read_text(encoding="utf-8") == "keep me"
