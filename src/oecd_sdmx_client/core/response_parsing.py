"""Response body parsing for the async transport."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger("oecd_sdmx_client")


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse a successful response body.

    A body that is not a JSON object is a decoding anomaly: it is logged and
    replaced by an empty payload, which decodes to an empty result.
    """

    try:
        payload = response.json()
    except ValueError:
        logger.warning("response body is not valid JSON http_status=%s", http_status)
        return {}

    if not isinstance(payload, dict):
        logger.warning(
            "response JSON root is not an object http_status=%s type=%s",
            http_status,
            type(payload).__name__,
        )
        return {}
    return payload


__all__ = [
    "parse_json_payload",
]
