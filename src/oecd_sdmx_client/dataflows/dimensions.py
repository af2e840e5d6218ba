"""Positional key decoding and structure extraction for SDMX-JSON payloads."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from .models import (
    AttributeDefinition,
    DataStructure,
    DimensionDefinition,
    DimensionLayout,
    DimensionValue,
)

JsonObject = Mapping[str, object]
LayoutExtractor = Callable[[object], "DimensionLayout | None"]

TIME_DIMENSION_ID = "TIME_PERIOD"

DEFAULT_DIMENSIONS: tuple[DimensionDefinition, ...] = (
    DimensionDefinition(
        "REF_AREA",
        "Reference Area",
        (DimensionValue("all", "Use query_data to get actual dimension values"),),
    ),
    DimensionDefinition(
        TIME_DIMENSION_ID,
        "Time Period",
        (DimensionValue("all", "Time dimension"),),
    ),
    DimensionDefinition(
        "MEASURE",
        "Measure",
        (DimensionValue("all", "Measured indicator"),),
    ),
)

DEFAULT_ATTRIBUTES: tuple[AttributeDefinition, ...] = (
    AttributeDefinition("UNIT_MEASURE", "Unit of Measure"),
    AttributeDefinition("OBS_STATUS", "Observation Status"),
)


def default_structure(dataflow_id: str) -> DataStructure:
    return DataStructure(
        dataflow_id=dataflow_id,
        dimensions=DEFAULT_DIMENSIONS,
        attributes=DEFAULT_ATTRIBUTES,
        source="fallback",
    )


def _parse_index(raw: str) -> int | None:
    return int(raw) if raw.isascii() and raw.isdigit() else None


def _resolve_position(
    position: int,
    raw_index: str,
    dims: Sequence[DimensionDefinition],
    *,
    fallback_id: str,
) -> tuple[str, str]:
    dim = dims[position] if position < len(dims) else None
    index = _parse_index(raw_index)
    if dim is None or index is None:
        return fallback_id, raw_index
    value = dim.value_at(index)
    if value is None:
        return fallback_id, raw_index
    return dim.id, value.id


def _split_key(key: str) -> list[str]:
    return key.split(":") if key else []


def decode_series_key(key: str, dims: Sequence[DimensionDefinition]) -> dict[str, str]:
    """Resolve ``"0:3:1"`` style keys to ``{dimension_id: value_id}``.

    Positions that cannot be resolved degrade to ``DIM_<i>`` with the raw index.
    """

    return dict(
        _resolve_position(position, raw, dims, fallback_id=f"DIM_{position}")
        for position, raw in enumerate(_split_key(key))
    )


def decode_observation_key(key: str, dims: Sequence[DimensionDefinition]) -> dict[str, str]:
    """Same as :func:`decode_series_key` for observation-level dimensions.

    Position 0 falls back to ``TIME_PERIOD``; later positions to ``OBS_DIM_<i>``.
    """

    return dict(
        _resolve_position(
            position,
            raw,
            dims,
            fallback_id=TIME_DIMENSION_ID if position == 0 else f"OBS_DIM_{position}",
        )
        for position, raw in enumerate(_split_key(key))
    )


def _display_name(item: JsonObject, default: str) -> str:
    name = item.get("name")
    if isinstance(name, str) and name:
        return name
    names = item.get("names")
    if isinstance(names, Mapping):
        english = names.get("en")
        if isinstance(english, str) and english:
            return english
    return default


def _parse_values(raw: object) -> tuple[DimensionValue, ...]:
    if not isinstance(raw, list):
        return ()
    values: list[DimensionValue] = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        value_id = item.get("id")
        if value_id is None:
            continue
        values.append(DimensionValue(str(value_id), _display_name(item, str(value_id))))
    return tuple(values)


def _parse_definitions(raw: object) -> tuple[DimensionDefinition, ...]:
    if not isinstance(raw, list):
        return ()
    definitions: list[DimensionDefinition] = []
    for item in raw:
        if not isinstance(item, Mapping) or item.get("id") is None:
            continue
        dim_id = str(item["id"])
        definitions.append(
            DimensionDefinition(dim_id, _display_name(item, dim_id), _parse_values(item.get("values")))
        )
    return tuple(definitions)


def _layout_from_structure(structure: object) -> DimensionLayout | None:
    if not isinstance(structure, Mapping):
        return None
    dimensions = structure.get("dimensions")
    if not isinstance(dimensions, Mapping):
        return None
    series = _parse_definitions(dimensions.get("series"))
    observation = _parse_definitions(dimensions.get("observation"))
    if not series and not observation:
        return None
    attributes = structure.get("attributes")
    observation_attributes = (
        _parse_definitions(attributes.get("observation"))
        if isinstance(attributes, Mapping)
        else ()
    )
    return DimensionLayout(
        series=series,
        observation=observation,
        observation_attributes=observation_attributes,
    )


def extract_from_structures(payload: object) -> DimensionLayout | None:
    """SDMX-JSON 2.0: ``data.structures[0].dimensions``."""

    if not isinstance(payload, Mapping):
        return None
    data = payload.get("data")
    if not isinstance(data, Mapping):
        return None
    structures = data.get("structures")
    if not isinstance(structures, list) or not structures:
        return None
    return _layout_from_structure(structures[0])


def extract_from_legacy_structure(payload: object) -> DimensionLayout | None:
    """SDMX-JSON 1.0: ``structure.dimensions`` at the root or under ``data``."""

    if not isinstance(payload, Mapping):
        return None
    layout = _layout_from_structure(payload.get("structure"))
    if layout is not None:
        return layout
    data = payload.get("data")
    if isinstance(data, Mapping):
        return _layout_from_structure(data.get("structure"))
    return None


LAYOUT_EXTRACTORS: tuple[LayoutExtractor, ...] = (
    extract_from_structures,
    extract_from_legacy_structure,
)


def extract_layout(
    payload: object,
    extractors: Sequence[LayoutExtractor] = LAYOUT_EXTRACTORS,
) -> DimensionLayout | None:
    for extractor in extractors:
        layout = extractor(payload)
        if layout is not None:
            return layout
    return None


def structure_from_layout(dataflow_id: str, layout: DimensionLayout) -> DataStructure:
    return DataStructure(
        dataflow_id=dataflow_id,
        dimensions=layout.dimensions,
        attributes=tuple(
            AttributeDefinition(attr.id, attr.name) for attr in layout.observation_attributes
        ),
        source="live",
    )


__all__ = [
    "TIME_DIMENSION_ID",
    "DEFAULT_DIMENSIONS",
    "DEFAULT_ATTRIBUTES",
    "LayoutExtractor",
    "LAYOUT_EXTRACTORS",
    "default_structure",
    "decode_series_key",
    "decode_observation_key",
    "extract_from_structures",
    "extract_from_legacy_structure",
    "extract_layout",
    "structure_from_layout",
]
