"""Async HTTP transport with throttling, deadlines, and retry."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Protocol

import httpx

from ..config import OecdClientConfig
from .async_throttling import AsyncMinIntervalThrottler
from .errors import (
    ClientClosedError,
    NetworkFailureError,
    OecdApiError,
    RemoteFailureError,
    RequestTimeoutError,
    is_success_status,
    is_transient_status,
)
from .models import RequestContext
from .response_parsing import parse_json_payload
from .retry import Outcome, RetryState, RetryStateMachine
from .transport_shared import build_default_headers, build_default_timeout

logger = logging.getLogger("oecd_sdmx_client")


class AsyncTransportClient(Protocol):
    async def get(self, url: str, *, params: Mapping[str, str]) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the OECD SDMX API."""

    def __init__(
        self,
        config: OecdClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        throttler: AsyncMinIntervalThrottler | None = None,
        sleeper: Callable[[float], Awaitable[None]] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config
        self._sleep = sleeper or _default_sleep
        self._clock = clock or time.monotonic
        self._closed = False

        self._throttler = throttler or AsyncMinIntervalThrottler(
            config.throttling.min_interval_seconds,
            clock=self._clock,
            sleeper=self._sleep,
        )
        self._owns_client = client is None
        normalized_base_url = config.base_url.rstrip("/") + "/"
        self._client = client or httpx.AsyncClient(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def execute(
        self,
        path: str,
        *,
        params: Mapping[str, str],
        context: RequestContext,
    ) -> dict[str, object]:
        if self._closed:
            raise ClientClosedError("transport is already closed")

        normalized_path = self._normalize_path(path)
        deadline = self._config.transport.request_deadline_seconds
        machine = RetryStateMachine(
            max_retries=self._config.retry.max_retries,
            initial_delay_seconds=self._config.retry.initial_delay_seconds,
        )

        while True:
            attempt = machine.attempt + 1
            logger.debug(
                "request start op=%s dataflow=%s attempt=%s",
                context.operation,
                context.dataflow_id,
                attempt,
            )
            await self._throttler.admit()

            cause: BaseException | None = None
            try:
                response = await asyncio.wait_for(
                    self._client.get(normalized_path, params=params),
                    timeout=deadline,
                )
            except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
                outcome = Outcome.TIMEOUT
                error: OecdApiError = RequestTimeoutError(
                    f"OECD API request timed out after {deadline:g} seconds",
                    dataflow_id=context.dataflow_id,
                    cause="timeout",
                )
                cause = exc
            except (httpx.TransportError, OSError) as exc:
                outcome = Outcome.NETWORK
                error = NetworkFailureError(
                    "network/transport error",
                    dataflow_id=context.dataflow_id,
                    cause="network",
                )
                cause = exc
            else:
                http_status = getattr(response, "status_code", None)
                logger.debug(
                    "response received op=%s attempt=%s http_status=%s",
                    context.operation,
                    attempt,
                    http_status,
                )
                if is_success_status(http_status):
                    machine.record(Outcome.SUCCESS)
                    logger.info(
                        "request success op=%s dataflow=%s attempt=%s",
                        context.operation,
                        context.dataflow_id,
                        attempt,
                    )
                    return parse_json_payload(response, http_status=http_status)
                outcome = (
                    Outcome.SERVER_ERROR if is_transient_status(http_status) else Outcome.PERMANENT
                )
                error = RemoteFailureError(
                    f"OECD API request failed with HTTP {http_status}",
                    http_status=http_status if http_status is not None else 0,
                    dataflow_id=context.dataflow_id,
                )

            step = machine.record(outcome)
            if machine.state is RetryState.BACKOFF:
                logger.warning(
                    "request transient failure; retrying op=%s dataflow=%s attempt=%s "
                    "outcome=%s delay=%.1fs",
                    context.operation,
                    context.dataflow_id,
                    attempt,
                    outcome.value,
                    step.delay_before_next,
                )
                await self._sleep(step.delay_before_next or 0.0)
                machine.resume()
                continue

            logger.error(
                "request failed op=%s dataflow=%s attempt=%s outcome=%s",
                context.operation,
                context.dataflow_id,
                attempt,
                outcome.value,
            )
            raise error from cause

    @staticmethod
    def _normalize_path(path: str) -> str:
        return path.lstrip("/")


async def _default_sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


__all__ = [
    "AsyncTransportClient",
    "AsyncTransport",
]
