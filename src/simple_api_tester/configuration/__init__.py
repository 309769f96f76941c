"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_test_suite, parse_test_cases
from .runtime_settings import RunSettings, normalize_base_url
from .suite_models import DEFAULT_TIMEOUT_SECONDS, HttpMethod, TestCase, TestSuite

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "HttpMethod",
    "TestCase",
    "TestSuite",
    "RunSettings",
    "normalize_base_url",
    "ConfigurationError",
    "load_test_suite",
    "parse_test_cases",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
