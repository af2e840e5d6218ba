"""Decoders from SDMX-JSON data messages into flat observation records."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence

from ..core.errors import DecodeAnomalyError
from .dimensions import decode_observation_key, decode_series_key, extract_layout
from .models import DimensionDefinition, DimensionLayout, Observation

logger = logging.getLogger("oecd_sdmx_client")

ObservationValue = int | float | str | None


def _require_mapping(value: object, *, name: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise DecodeAnomalyError(f"{name} must be an object")
    return value


def _unwrap_value(raw: object) -> tuple[ObservationValue, Sequence[object]]:
    # Observations arrive as [value, attr_idx, ...] or as a bare scalar.
    if isinstance(raw, list):
        if not raw:
            return None, ()
        head, rest = raw[0], raw[1:]
    else:
        head, rest = raw, ()
    if isinstance(head, bool) or not isinstance(head, (int, float, str)):
        return None, rest
    return head, rest


def _resolve_attributes(
    indices: Sequence[object],
    definitions: Sequence[DimensionDefinition],
) -> dict[str, str]:
    attributes: dict[str, str] = {}
    for position, raw_index in enumerate(indices):
        if raw_index is None:
            continue
        definition = definitions[position] if position < len(definitions) else None
        if definition is None:
            attributes[f"ATTR_{position}"] = str(raw_index)
            continue
        value = (
            definition.value_at(raw_index)
            if isinstance(raw_index, int) and not isinstance(raw_index, bool)
            else None
        )
        attributes[definition.id] = value.id if value is not None else str(raw_index)
    return attributes


def _iter_observation_map(
    observations: object,
    base_dimensions: Mapping[str, str],
    layout: DimensionLayout,
) -> Iterator[Observation]:
    if not isinstance(observations, Mapping):
        return
    for obs_key, raw in observations.items():
        value, attribute_indices = _unwrap_value(raw)
        dimensions = dict(base_dimensions)
        dimensions.update(decode_observation_key(str(obs_key), layout.observation))
        yield Observation(
            dimensions=dimensions,
            value=value,
            attributes=_resolve_attributes(attribute_indices, layout.observation_attributes),
        )


def iter_observations(payload: object, layout: DimensionLayout) -> Iterator[Observation]:
    """Lazily walk ``data.dataSets[*].series[*].observations``.

    Raises DecodeAnomalyError only when the top-level shape is unusable;
    malformed inner entries are skipped.
    """

    root = _require_mapping(payload, name="payload")
    data = _require_mapping(root.get("data"), name="data")
    datasets = data.get("dataSets")
    if not isinstance(datasets, list):
        raise DecodeAnomalyError("data.dataSets must be a list")

    for dataset in datasets:
        if not isinstance(dataset, Mapping):
            logger.debug("skipping non-object dataSet entry")
            continue
        series_map = dataset.get("series")
        if series_map is None:
            # AllDimensions layout: flat observations keyed by every dimension.
            yield from _iter_observation_map(dataset.get("observations"), {}, layout)
            continue
        if not isinstance(series_map, Mapping):
            logger.debug("skipping dataSet with non-object series")
            continue
        for series_key, series in series_map.items():
            if not isinstance(series, Mapping):
                logger.debug("skipping non-object series key=%s", series_key)
                continue
            base = decode_series_key(str(series_key), layout.series)
            yield from _iter_observation_map(series.get("observations"), base, layout)


def decode_observations(
    payload: object,
    limit: int | None = None,
    *,
    layout: DimensionLayout | None = None,
) -> tuple[Observation, ...]:
    """Decode a data message, keeping at most ``limit`` records.

    Some dataflows ignore ``lastNObservations`` server-side, so ``limit`` is
    enforced while walking rather than by truncating afterwards; walking stops
    at the first observation past the limit. Never raises
    on malformed payloads; returns what could be decoded.
    """

    if limit is not None and limit <= 0:
        return ()
    resolved = layout or extract_layout(payload) or DimensionLayout()

    collected: list[Observation] = []
    try:
        for observation in iter_observations(payload, resolved):
            if limit is not None and len(collected) >= limit:
                # Only reached when at least one observation is being dropped.
                logger.warning(
                    "client-side limit reached: %s observations; "
                    "remote may have ignored lastNObservations",
                    limit,
                )
                break
            collected.append(observation)
    except DecodeAnomalyError as exc:
        logger.warning("malformed data message: %s", exc)
    return tuple(collected)


__all__ = [
    "iter_observations",
    "decode_observations",
]
