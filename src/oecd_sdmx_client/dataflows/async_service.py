"""Async dataflow operations: catalog listing, structure discovery, data queries."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from ..core.async_transport import AsyncTransport
from ..core.diagnostics import build_diagnostic
from ..core.errors import OecdTransientError, RemoteFailureError, UnknownDataflowError
from ..core.models import RequestContext
from .catalog import DataflowCatalog, DataflowReference, StaticDataflowCatalog
from .dimensions import default_structure, extract_layout, structure_from_layout
from .filters import (
    MAX_FILTER_LENGTH,
    sanitize_filter,
    validate_dataflow_id,
    validate_period,
    validate_positive_int,
)
from .models import DataStructure, Observation
from .params import DATA_EXPLORER_URL, build_data_params, build_data_path, build_structure_params
from .parser import decode_observations
from .queries import DEFAULT_FILTER, DataQuery

logger = logging.getLogger("oecd_sdmx_client")


class AsyncDataflowService:
    """Composes validation, transport, and decoding per operation."""

    def __init__(
        self,
        transport: AsyncTransport,
        *,
        catalog: DataflowCatalog | None = None,
        max_filter_length: int = MAX_FILTER_LENGTH,
    ) -> None:
        self._transport = transport
        self._catalog = catalog or StaticDataflowCatalog()
        self._max_filter_length = max_filter_length

    def list_dataflows(self, category: str | None = None) -> tuple[DataflowReference, ...]:
        if category is None:
            return self._catalog.all()
        return self._catalog.by_category(category)

    def search_dataflows(self, text: str) -> tuple[DataflowReference, ...]:
        return self._catalog.search(text)

    def data_explorer_url(self, dataflow_id: str, filter: str | None = None) -> str:
        dataflow = self._resolve(dataflow_id)
        params = {"df[ag]": dataflow.agency, "df[id]": dataflow.full_id}
        if filter:
            params["dq"] = sanitize_filter(filter, max_length=self._max_filter_length).raw
        return f"{DATA_EXPLORER_URL}?{urlencode(params)}"

    async def get_data_structure(self, dataflow_id: str) -> DataStructure:
        dataflow = self._resolve(dataflow_id)
        context = RequestContext(operation="get_data_structure", dataflow_id=dataflow.id)
        path = build_data_path(dataflow, sanitize_filter(DEFAULT_FILTER))
        try:
            payload = await self._transport.execute(
                path,
                params=build_structure_params(),
                context=context,
            )
        except (OecdTransientError, RemoteFailureError) as exc:
            logger.warning(
                "structure request failed; using default structure dataflow=%s error=%s",
                dataflow.id,
                exc.__class__.__name__,
            )
            return default_structure(dataflow.id)

        layout = extract_layout(payload)
        if layout is None:
            logger.warning(
                "no structure metadata in response; using default structure dataflow=%s",
                dataflow.id,
            )
            return default_structure(dataflow.id)
        return structure_from_layout(dataflow.id, layout)

    async def query_data(self, query: DataQuery) -> tuple[Observation, ...]:
        dataflow = self._resolve(query.dataflow_id)
        sanitized = sanitize_filter(query.filter, max_length=self._max_filter_length)
        validate_period(query.start_period, name="start_period")
        validate_period(query.end_period, name="end_period")
        validate_positive_int(query.last_n_observations, name="last_n_observations")
        validate_positive_int(query.limit, name="limit")

        context = RequestContext(
            operation="query_data",
            dataflow_id=dataflow.id,
            provided_filter=query.filter,
        )
        try:
            payload = await self._transport.execute(
                build_data_path(dataflow, sanitized),
                params=build_data_params(query),
                context=context,
            )
        except RemoteFailureError as exc:
            raise _with_diagnostic(exc, context) from exc
        return decode_observations(payload, query.effective_limit)

    def _resolve(self, dataflow_id: str) -> DataflowReference:
        validate_dataflow_id(dataflow_id)
        dataflow = self._catalog.lookup(dataflow_id)
        if dataflow is None:
            raise UnknownDataflowError(
                f"Unknown dataflow: {dataflow_id}. Use list_dataflows() to see available dataflows.",
                dataflow_id=dataflow_id,
            )
        return dataflow


def _with_diagnostic(exc: RemoteFailureError, context: RequestContext) -> RemoteFailureError:
    status = exc.http_status or 0
    return RemoteFailureError(
        exc.message,
        http_status=status,
        dataflow_id=context.dataflow_id,
        diagnostic=build_diagnostic(
            status,
            dataflow_id=context.dataflow_id,
            provided_filter=context.provided_filter,
        ),
    )


__all__ = [
    "AsyncDataflowService",
]
