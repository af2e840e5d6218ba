from __future__ import annotations

import pytest

from oecd_sdmx_client.async_client import AsyncOecdClient
from oecd_sdmx_client.config import OecdClientConfig, RetryConfig, ThrottlingConfig
from oecd_sdmx_client.core.errors import ClientClosedError, InvalidConfigError, InvalidFilterError
from oecd_sdmx_client.dataflows.catalog import DataflowReference, StaticDataflowCatalog
from oecd_sdmx_client.dataflows.queries import DataQuery
from tests.shared.client_fakes import DummyAsyncTransport


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    transport = DummyAsyncTransport()
    async with AsyncOecdClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    transport = DummyAsyncTransport()
    client = AsyncOecdClient(transport=transport)
    await client.close()
    await client.close()

    with pytest.raises(ClientClosedError):
        await client.dataflows.query_data(DataQuery("QNA"))
    with pytest.raises(ClientClosedError):
        await client.dataflows.get_data_structure("QNA")
    with pytest.raises(ClientClosedError):
        client.dataflows.list_dataflows()
    with pytest.raises(ClientClosedError):
        async with client:
            pass
    assert transport.calls == []


@pytest.mark.asyncio
async def test_async_client_delegates_dataflow_methods():
    transport = DummyAsyncTransport()
    async with AsyncOecdClient(transport=transport) as client:
        observations = await client.dataflows.query_data(DataQuery("QNA", "USA.GDP.."))
        structure = await client.dataflows.get_data_structure("QNA")
        listed = client.dataflows.list_dataflows(category="HOU")
        found = client.dataflows.search_dataflows("house price")
        url = client.dataflows.data_explorer_url("QNA")

    assert len(observations) == 1
    assert observations[0].value == 1.5
    assert structure.source == "live"
    assert {entry.id for entry in listed} == {"HPI", "RPPI"}
    assert "HPI" in {entry.id for entry in found}
    assert url.startswith("https://data-explorer.oecd.org/vis?")
    assert len(transport.calls) == 2


@pytest.mark.asyncio
async def test_async_client_accepts_custom_catalog():
    catalog = StaticDataflowCatalog(
        (
            DataflowReference(
                id="TEST",
                full_id="DSD_TEST@DF_TEST",
                agency="OECD.TEST",
                version="1.0",
                name="Test dataflow",
                description="Only used in tests",
                category="ECO",
            ),
        )
    )
    transport = DummyAsyncTransport()
    async with AsyncOecdClient(transport=transport, catalog=catalog) as client:
        await client.dataflows.query_data(DataQuery("TEST", "A.B"))
        assert [entry.id for entry in client.dataflows.list_dataflows()] == ["TEST"]

    assert transport.calls[0][0] == "/data/OECD.TEST,DSD_TEST@DF_TEST/A.B"


@pytest.mark.asyncio
async def test_async_client_honours_configured_filter_length():
    transport = DummyAsyncTransport()
    config = OecdClientConfig(max_filter_length=5)
    async with AsyncOecdClient(config=config, transport=transport) as client:
        with pytest.raises(InvalidFilterError, match="maximum length of 5"):
            await client.dataflows.query_data(DataQuery("QNA", "USA.GDP"))
    assert transport.calls == []


@pytest.mark.parametrize(
    "config",
    [
        OecdClientConfig(base_url="ftp://example.org"),
        OecdClientConfig(retry=RetryConfig(max_retries=-1)),
        OecdClientConfig(throttling=ThrottlingConfig(min_interval_seconds=-0.5)),
        OecdClientConfig(max_filter_length=0),
    ],
)
def test_async_client_rejects_invalid_config(config: OecdClientConfig):
    with pytest.raises(InvalidConfigError):
        AsyncOecdClient(config=config, transport=DummyAsyncTransport())
