"""Dataflow service package."""

from .catalog import DataflowReference
from .filters import SanitizedFilter, sanitize_filter
from .models import (
    AttributeDefinition,
    DataStructure,
    DimensionDefinition,
    DimensionLayout,
    DimensionValue,
    Observation,
)
from .queries import DataQuery

__all__ = [
    "DataQuery",
    "DataflowReference",
    "DataStructure",
    "DimensionDefinition",
    "DimensionLayout",
    "DimensionValue",
    "AttributeDefinition",
    "Observation",
    "SanitizedFilter",
    "sanitize_filter",
]
