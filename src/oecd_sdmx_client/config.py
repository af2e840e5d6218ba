"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

OECD_SDMX_BASE_URL = "https://sdmx.oecd.org/public/rest"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    request_deadline_seconds: float = 30.0
    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "request_deadline_seconds",
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class RetryConfig:
    """Retry-related settings."""

    max_retries: int = 3
    initial_delay_seconds: float = 1.0

    def validate(self) -> None:
        if self.max_retries < 0:
            raise ValueError("retry.max_retries must be >= 0")
        if self.initial_delay_seconds < 0:
            raise ValueError("retry.initial_delay_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class ThrottlingConfig:
    """Throttling-related settings."""

    # The OECD endpoint blocks a client IP after ~20-30 unspaced requests.
    min_interval_seconds: float = 1.5

    def validate(self) -> None:
        if self.min_interval_seconds < 0:
            raise ValueError("throttling.min_interval_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class OecdClientConfig:
    """Runtime configuration for the OECD SDMX client."""

    base_url: str = OECD_SDMX_BASE_URL
    user_agent: str = "oecd-sdmx-client/0.1.0"
    max_filter_length: int = 200

    transport: TransportConfig = field(default_factory=TransportConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    throttling: ThrottlingConfig = field(default_factory=ThrottlingConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.startswith(("https://", "http://")):
            raise ValueError("base_url must be an http(s) URL")
        if self.max_filter_length < 1:
            raise ValueError("max_filter_length must be >= 1")
        self.transport.validate()
        self.retry.validate()
        self.throttling.validate()


__all__ = [
    "OECD_SDMX_BASE_URL",
    "TransportConfig",
    "RetryConfig",
    "ThrottlingConfig",
    "OecdClientConfig",
]
