from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from oecd_sdmx_client.config import (
    OECD_SDMX_BASE_URL,
    OecdClientConfig,
    RetryConfig,
    ThrottlingConfig,
    TransportConfig,
)


def test_config_defaults_match_remote_policy():
    cfg = OecdClientConfig()
    assert cfg.base_url == OECD_SDMX_BASE_URL
    assert cfg.throttling.min_interval_seconds == 1.5
    assert cfg.retry.max_retries == 3
    assert cfg.retry.initial_delay_seconds == 1.0
    assert cfg.transport.request_deadline_seconds == 30.0
    assert cfg.max_filter_length == 200


def test_config_validate_rejects_empty_base_url():
    cfg = OecdClientConfig(base_url="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_validate_rejects_non_http_base_url():
    cfg = OecdClientConfig(base_url="file:///etc/passwd")
    with pytest.raises(ValueError, match="http"):
        cfg.validate()


def test_config_is_immutable():
    cfg = OecdClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.retry = RetryConfig(max_retries=10)


@pytest.mark.parametrize(
    ("section", "field", "value"),
    [
        ("retry", "max_retries", -1),
        ("retry", "initial_delay_seconds", -1.0),
        ("throttling", "min_interval_seconds", -1.0),
        ("transport", "request_deadline_seconds", 0.0),
        ("transport", "timeout_connect_seconds", 0.0),
        ("transport", "timeout_read_seconds", 0.0),
        ("transport", "timeout_write_seconds", 0.0),
        ("transport", "timeout_pool_seconds", 0.0),
    ],
)
def test_config_validate_rejects_invalid_numeric_values(section, field, value):
    kwargs = {field: value}
    cfg = OecdClientConfig(
        retry=RetryConfig(**kwargs) if section == "retry" else RetryConfig(),
        throttling=ThrottlingConfig(**kwargs) if section == "throttling" else ThrottlingConfig(),
        transport=TransportConfig(**kwargs) if section == "transport" else TransportConfig(),
    )
    with pytest.raises(ValueError, match=f"{section}.{field}"):
        cfg.validate()


def test_config_validate_rejects_non_positive_filter_length():
    with pytest.raises(ValueError, match="max_filter_length"):
        OecdClientConfig(max_filter_length=0).validate()
