from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from oecd_sdmx_client.core.diagnostics import build_diagnostic
from oecd_sdmx_client.dataflows.models import (
    DataStructure,
    DimensionDefinition,
    DimensionLayout,
    DimensionValue,
    Observation,
)


def test_dimension_values_are_tuple():
    dim = DimensionDefinition("REF_AREA", "Area", [DimensionValue("USA", "US")])
    assert isinstance(dim.values, tuple)
    assert dim.value_at(0) == DimensionValue("USA", "US")
    assert dim.value_at(1) is None
    assert dim.value_at(-1) is None


def test_layout_and_structure_sequences_are_tuples():
    layout = DimensionLayout(series=[], observation=[], observation_attributes=[])
    assert isinstance(layout.series, tuple)
    structure = DataStructure(dataflow_id="QNA", dimensions=[], attributes=[])
    assert isinstance(structure.dimensions, tuple)
    assert isinstance(structure.attributes, tuple)


def test_observation_mappings_are_read_only_copies():
    source = {"REF_AREA": "USA"}
    observation = Observation(dimensions=source, value=1.0)
    source["REF_AREA"] = "SWE"
    assert observation.dimensions["REF_AREA"] == "USA"
    with pytest.raises(TypeError):
        observation.dimensions["REF_AREA"] = "DEU"  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        observation.value = 2.0  # type: ignore[misc]


def test_diagnostic_is_immutable():
    diagnostic = build_diagnostic(422)
    assert isinstance(diagnostic.suggestions, tuple)
    with pytest.raises(TypeError):
        diagnostic.filter_syntax["format"] = "x"  # type: ignore[index]
    with pytest.raises(FrozenInstanceError):
        diagnostic.http_status = 500  # type: ignore[misc]
