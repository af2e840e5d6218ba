"""Shared helpers for the HTTP transport."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import OecdClientConfig


def build_default_headers(config: OecdClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: OecdClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
]
