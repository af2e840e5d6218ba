"""Actionable diagnostics for non-success HTTP statuses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

FILTER_SYNTAX_RULES: Mapping[str, str] = MappingProxyType(
    {
        "format": "DIM1.DIM2.DIM3.DIM4",
        "example": "SWE.B1_GE..",
        "multipleValues": "SWE+NOR+DNK.B1_GE..",
        "allValues": "Use empty position (..) or omit trailing dimensions",
    }
)


@dataclass(slots=True, frozen=True)
class ErrorDiagnostic:
    http_status: int
    message: str
    suggestions: tuple[str, ...]
    dataflow_id: str | None = None
    provided_filter: str | None = None
    cause: str | None = None
    filter_syntax: Mapping[str, str] = field(default_factory=dict)
    extras: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "suggestions", tuple(self.suggestions))
        object.__setattr__(self, "filter_syntax", MappingProxyType(dict(self.filter_syntax)))
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {
            "error": "OECD API request failed",
            "statusCode": self.http_status,
            "dataflowId": self.dataflow_id,
            "providedFilter": self.provided_filter,
            "message": self.message,
            "suggestions": list(self.suggestions),
        }
        if self.cause is not None:
            out["cause"] = self.cause
        if self.filter_syntax:
            out["filterSyntax"] = dict(self.filter_syntax)
        out.update(self.extras)
        return out


def build_diagnostic(
    http_status: int,
    *,
    dataflow_id: str | None = None,
    provided_filter: str | None = None,
) -> ErrorDiagnostic:
    """Map an HTTP status to remediation hints. Pure function."""

    df = dataflow_id or "<dataflow_id>"
    common = {"dataflow_id": dataflow_id, "provided_filter": provided_filter}

    if http_status == 400:
        return ErrorDiagnostic(
            http_status,
            "Bad request - the query syntax is invalid",
            (
                "Check that the dataflow_id is correct",
                "Verify the filter syntax follows SDMX format: DIM1.DIM2.DIM3",
                "Use dots (.) to separate dimensions, empty position means all values",
            ),
            extras={"example": f'query_data({{dataflow_id: "{df}", last_n_observations: 10}})'},
            **common,
        )
    if http_status == 404:
        return ErrorDiagnostic(
            http_status,
            "Dataset or filter combination not found",
            (
                f'Verify "{df}" exists using search_dataflows or list_dataflows',
                "Check that the filter values exist in the dataset",
                "Try querying without filter first to see available data",
            ),
            extras={"example": f'search_dataflows({{query: "{df}"}})'},
            **common,
        )
    if http_status == 422:
        return ErrorDiagnostic(
            http_status,
            "Invalid filter format or dimension values",
            (
                "1. Use get_data_structure to see the dimension order for this dataset",
                "2. Ensure filter matches the exact dimension order",
                "3. Use valid country codes (ISO 3166-1 alpha-3): SWE, USA, DEU, etc.",
                "4. For multiple countries use + separator: SWE+NOR+DNK",
                "5. Empty position (..) means all values for that dimension",
                "6. Try a simpler query first with just last_n_observations",
            ),
            cause=(
                "The filter structure does not match the dataset dimensions, "
                "or the dimension values do not exist"
            ),
            filter_syntax=FILTER_SYNTAX_RULES,
            extras={
                "recommendedFirstStep": f'get_data_structure({{dataflow_id: "{df}"}})',
                "simpleQueryExample": (
                    f'query_data({{dataflow_id: "{df}", last_n_observations: 10}})'
                ),
            },
            **common,
        )
    if http_status == 429:
        return ErrorDiagnostic(
            http_status,
            "Rate limit exceeded - too many requests",
            (
                "Wait a few seconds before retrying",
                "Reduce the frequency of API calls",
                "The client automatically enforces rate limiting between requests",
            ),
            extras={"retryAfter": "5 seconds"},
            **common,
        )
    if 500 <= http_status < 600:
        return ErrorDiagnostic(
            http_status,
            "OECD server error - temporary issue",
            (
                "This is a server-side issue, not a problem with your query",
                "Wait a moment and try again",
                "If the problem persists, the OECD API may be under maintenance",
            ),
            extras={"checkStatus": "https://data.oecd.org/"},
            **common,
        )
    return ErrorDiagnostic(
        http_status,
        "Unexpected error from OECD API",
        (
            "Check your query parameters",
            "Verify the dataflow_id exists",
            "Try a simpler query first",
        ),
        **common,
    )


__all__ = [
    "FILTER_SYNTAX_RULES",
    "ErrorDiagnostic",
    "build_diagnostic",
]
