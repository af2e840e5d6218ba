"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import validate_client_config
from .config import OecdClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import ClientClosedError
from .dataflows.async_service import AsyncDataflowService
from .dataflows.catalog import DataflowCatalog, DataflowReference
from .dataflows.models import DataStructure, Observation
from .dataflows.queries import DataQuery


class _GuardedAsyncDataflowService:
    """Guard wrapper to block usage after async client close."""

    def __init__(self, owner: "AsyncOecdClient", delegate: AsyncDataflowService) -> None:
        self._owner = owner
        self._delegate = delegate

    def list_dataflows(self, category: str | None = None) -> tuple[DataflowReference, ...]:
        self._owner._ensure_open()
        return self._delegate.list_dataflows(category)

    def search_dataflows(self, text: str) -> tuple[DataflowReference, ...]:
        self._owner._ensure_open()
        return self._delegate.search_dataflows(text)

    def data_explorer_url(self, dataflow_id: str, filter: str | None = None) -> str:
        self._owner._ensure_open()
        return self._delegate.data_explorer_url(dataflow_id, filter)

    async def get_data_structure(self, dataflow_id: str) -> DataStructure:
        self._owner._ensure_open()
        return await self._delegate.get_data_structure(dataflow_id)

    async def query_data(self, query: DataQuery) -> tuple[Observation, ...]:
        self._owner._ensure_open()
        return await self._delegate.query_data(query)


class AsyncOecdClient:
    """Public async OECD SDMX client."""

    def __init__(
        self,
        *,
        config: OecdClientConfig | None = None,
        transport: AsyncTransport | None = None,
        catalog: DataflowCatalog | None = None,
        dataflow_service: AsyncDataflowService | None = None,
    ) -> None:
        self._config = config or OecdClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        internal_service = dataflow_service or AsyncDataflowService(
            self._transport,
            catalog=catalog,
            max_filter_length=self._config.max_filter_length,
        )
        self._closed = False
        self.dataflows = _GuardedAsyncDataflowService(self, internal_service)

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("AsyncOecdClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncOecdClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncOecdClient",
]
