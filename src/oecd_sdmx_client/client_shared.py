"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import OecdClientConfig
from .core.errors import InvalidConfigError


def validate_client_config(config: OecdClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise InvalidConfigError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
