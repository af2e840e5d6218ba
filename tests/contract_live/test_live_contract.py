from __future__ import annotations

import os

import pytest

from oecd_sdmx_client import AsyncOecdClient, DataQuery, OecdClientConfig


pytestmark = pytest.mark.live


def _require_live_flag() -> None:
    if os.getenv("OECD_LIVE_TESTS") != "1":
        pytest.skip("Set OECD_LIVE_TESTS=1 to run live contract tests")


def _live_client() -> AsyncOecdClient:
    cfg = OecdClientConfig()
    cfg.validate()
    return AsyncOecdClient(config=cfg)


@pytest.mark.asyncio
async def test_live_query_data_contract_minimum():
    _require_live_flag()
    async with _live_client() as client:
        observations = await client.dataflows.query_data(
            DataQuery("QNA", last_n_observations=1, limit=4)
        )

    assert 0 < len(observations) <= 4
    assert all("TIME_PERIOD" in obs.dimensions for obs in observations)


@pytest.mark.asyncio
async def test_live_get_data_structure_contract_minimum():
    _require_live_flag()
    async with _live_client() as client:
        structure = await client.dataflows.get_data_structure("QNA")

    assert structure.dataflow_id == "QNA"
    assert len(structure.dimensions) > 0
    assert all(isinstance(dim.id, str) for dim in structure.dimensions)
