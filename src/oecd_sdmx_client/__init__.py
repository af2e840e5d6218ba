"""Public package exports for the OECD SDMX client."""

from .async_client import AsyncOecdClient
from .config import OecdClientConfig
from .dataflows.queries import DataQuery

__all__ = ["AsyncOecdClient", "OecdClientConfig", "DataQuery"]
