"""Query models."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FILTER = "all"


@dataclass(slots=True, frozen=True)
class DataQuery:
    dataflow_id: str
    filter: str = DEFAULT_FILTER
    start_period: str | None = None
    end_period: str | None = None
    last_n_observations: int | None = None
    # Client-side cap on decoded observations; defaults to last_n_observations.
    limit: int | None = None

    @property
    def effective_limit(self) -> int | None:
        return self.limit if self.limit is not None else self.last_n_observations


__all__ = [
    "DEFAULT_FILTER",
    "DataQuery",
]
