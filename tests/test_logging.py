"""Tests for the logging configuration model.

init_logging itself runs through every CLI integration test.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from basicdefs import __init__conf__
from basicdefs.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """Empty input produces sensible defaults."""
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_defaults_service_to_package_name() -> None:
    """Without a configured service the package name is used."""
    runtime_config = _build_runtime_config(Config({"lib_log_rich": {"environment": "test"}}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "test"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service() -> None:
    """A configured service name wins over the default."""
    runtime_config = _build_runtime_config(Config({"lib_log_rich": {"service": "helpers-ci"}}, {}))

    assert runtime_config.service == "helpers-ci"
