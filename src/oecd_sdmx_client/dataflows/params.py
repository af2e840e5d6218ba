"""Request path and parameter builders for the SDMX data endpoint."""

from __future__ import annotations

from .catalog import DataflowReference
from .filters import SanitizedFilter
from .queries import DataQuery

DATA_EXPLORER_URL = "https://data-explorer.oecd.org/vis"


def build_data_path(dataflow: DataflowReference, sanitized: SanitizedFilter) -> str:
    # Version is omitted: most OECD dataflows reject an explicit one.
    return f"/data/{dataflow.agency},{dataflow.full_id}/{sanitized.encoded}"


def build_data_params(query: DataQuery) -> dict[str, str]:
    params = {"format": "jsondata"}
    if query.start_period:
        params["startPeriod"] = query.start_period
    if query.end_period:
        params["endPeriod"] = query.end_period
    if query.last_n_observations:
        params["lastNObservations"] = str(query.last_n_observations)
    return params


def build_structure_params() -> dict[str, str]:
    return {"format": "jsondata", "lastNObservations": "1"}


__all__ = [
    "DATA_EXPLORER_URL",
    "build_data_path",
    "build_data_params",
    "build_structure_params",
]
