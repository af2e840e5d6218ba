"""Dataflow structure and observation models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal


@dataclass(slots=True, frozen=True)
class DimensionValue:
    id: str
    name: str


@dataclass(slots=True, frozen=True)
class DimensionDefinition:
    id: str
    name: str
    values: tuple[DimensionValue, ...] | list[DimensionValue] = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, tuple):
            return
        object.__setattr__(self, "values", tuple(self.values))

    def value_at(self, index: int) -> DimensionValue | None:
        if 0 <= index < len(self.values):
            return self.values[index]
        return None


@dataclass(slots=True, frozen=True)
class DimensionLayout:
    """Dimension definitions split the way SDMX-JSON keys are split."""

    series: tuple[DimensionDefinition, ...] | list[DimensionDefinition] = ()
    observation: tuple[DimensionDefinition, ...] | list[DimensionDefinition] = ()
    observation_attributes: tuple[DimensionDefinition, ...] | list[DimensionDefinition] = ()

    def __post_init__(self) -> None:
        for name in ("series", "observation", "observation_attributes"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    @property
    def dimensions(self) -> tuple[DimensionDefinition, ...]:
        return tuple(self.series) + tuple(self.observation)


@dataclass(slots=True, frozen=True)
class AttributeDefinition:
    id: str
    name: str


@dataclass(slots=True, frozen=True)
class DataStructure:
    dataflow_id: str
    dimensions: tuple[DimensionDefinition, ...] | list[DimensionDefinition]
    attributes: tuple[AttributeDefinition, ...] | list[AttributeDefinition] = ()
    source: Literal["live", "fallback"] = "live"

    def __post_init__(self) -> None:
        if not isinstance(self.dimensions, tuple):
            object.__setattr__(self, "dimensions", tuple(self.dimensions))
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))


@dataclass(slots=True, frozen=True)
class Observation:
    dimensions: Mapping[str, str]
    value: int | float | str | None
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimensions", MappingProxyType(dict(self.dimensions)))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {"dimensions": dict(self.dimensions), "value": self.value}
        if self.attributes:
            out["attributes"] = dict(self.attributes)
        return out


__all__ = [
    "DimensionValue",
    "DimensionDefinition",
    "DimensionLayout",
    "AttributeDefinition",
    "DataStructure",
    "Observation",
]
