"""Error types and status classification."""

from __future__ import annotations

from enum import Enum

from .diagnostics import FILTER_SYNTAX_RULES, ErrorDiagnostic


class ErrorCategory(str, Enum):
    """Tag shared by retry policy and user-facing rendering."""

    INPUT = "input"
    TRANSIENT = "transient"
    REMOTE = "remote"
    DECODE = "decode"


class OecdApiError(Exception):
    """Base exception for this package.

    Every subclass renders through :meth:`to_dict` with its category and a
    list of remediation ``suggestions``.
    """

    category: ErrorCategory = ErrorCategory.REMOTE
    suggestions: tuple[str, ...] = (
        "Check your query parameters",
        "Try a simpler query first",
    )

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        dataflow_id: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.dataflow_id = dataflow_id
        self.cause = cause

    @property
    def retryable(self) -> bool:
        """Whether this class of failure is transient.

        Determined by ``category`` alone. A raised transient error means the
        executor already spent its retries; callers may try again later.
        """

        return self.category is ErrorCategory.TRANSIENT

    def to_dict(self) -> dict[str, object]:
        """Structured form safe to forward to untrusted callers."""

        out: dict[str, object] = {
            "category": self.category.value,
            "error": type(self).__name__,
            "message": self.message,
        }
        if self.http_status is not None:
            out["statusCode"] = self.http_status
        if self.dataflow_id is not None:
            out["dataflowId"] = self.dataflow_id
        out["suggestions"] = list(self.suggestions)
        return out


class OecdInputError(OecdApiError):
    """Caller supplied input that can never succeed; re-prompt, do not retry."""

    category = ErrorCategory.INPUT


class InvalidConfigError(OecdInputError):
    """Client configuration failed validation."""

    suggestions = (
        "Check the client configuration values named in the message",
        "Omit a setting to use its default",
    )


class ClientClosedError(OecdInputError):
    """Raised when client is used after close."""

    suggestions = ("Create a new client; a closed client cannot be reopened",)


class UnknownDataflowError(OecdInputError):
    """Dataflow id is not in the catalog."""

    suggestions = (
        "Use list_dataflows to see available dataflows",
        "Use search_dataflows to find a dataflow by keyword",
    )


class InvalidFilterError(OecdInputError):
    """Filter fragment violates the permitted character grammar."""

    suggestions = (
        "Only alphanumeric characters and ._-:+* are allowed",
        "Separate dimensions with dots (.) and combine values with +",
        "Use get_data_structure to see the dimension order for this dataset",
    )

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value

    def to_dict(self) -> dict[str, object]:
        out = super().to_dict()
        out["providedFilter"] = self.value if isinstance(self.value, str) else None
        out["filterSyntax"] = dict(FILTER_SYNTAX_RULES)
        return out


class InvalidPeriodError(OecdInputError):
    """startPeriod/endPeriod is not an SDMX period token."""

    suggestions = (
        "Use YYYY, YYYY-MM, YYYY-MM-DD, YYYY-Qn, YYYY-Sn, YYYY-Wnn or YYYY-Mnn",
        "Omit start_period and end_period to query the full range",
    )


class InvalidQueryError(OecdInputError):
    """last_n_observations or limit is not a positive integer."""

    suggestions = (
        "Pass last_n_observations and limit as positive integers",
        "Omit them to return every observation",
    )


class OecdTransientError(OecdApiError):
    """Failure that may succeed when retried."""

    category = ErrorCategory.TRANSIENT


class RequestTimeoutError(OecdTransientError):
    """Attempt exceeded its wall-clock deadline and retries were exhausted."""

    suggestions = (
        "Retry later; the OECD API may be slow or overloaded",
        "Narrow the query with last_n_observations or a more specific filter",
    )


class NetworkFailureError(OecdTransientError):
    """Connection/DNS/TLS-level failure and retries were exhausted."""

    suggestions = (
        "Check network connectivity to sdmx.oecd.org",
        "Retry later; the OECD API may be temporarily unreachable",
    )


class RemoteFailureError(OecdApiError):
    """The remote answered with a non-success HTTP status."""

    category = ErrorCategory.REMOTE

    def __init__(
        self,
        message: str,
        *,
        http_status: int,
        dataflow_id: str | None = None,
        diagnostic: ErrorDiagnostic | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, dataflow_id=dataflow_id)
        self.diagnostic = diagnostic

    def to_dict(self) -> dict[str, object]:
        out = super().to_dict()
        if self.diagnostic is not None:
            out["suggestions"] = list(self.diagnostic.suggestions)
            out["diagnostic"] = self.diagnostic.to_dict()
        return out


class DecodeAnomalyError(OecdApiError):
    """Malformed payload shape. Logged by the decoder, only raised by strict helpers."""

    category = ErrorCategory.DECODE
    suggestions = (
        "The response did not match the SDMX-JSON layout",
        "Retry with a narrower query or check the dataset in the OECD Data Explorer",
    )


def is_success_status(status: int | None) -> bool:
    return status is not None and 200 <= status < 300


def is_transient_status(status: int | None) -> bool:
    return status is not None and 500 <= status < 600


__all__ = [
    "ErrorCategory",
    "OecdApiError",
    "OecdInputError",
    "InvalidConfigError",
    "ClientClosedError",
    "UnknownDataflowError",
    "InvalidFilterError",
    "InvalidPeriodError",
    "InvalidQueryError",
    "OecdTransientError",
    "RequestTimeoutError",
    "NetworkFailureError",
    "RemoteFailureError",
    "DecodeAnomalyError",
    "is_success_status",
    "is_transient_status",
]
