import logging
from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

from cart_offer.errors import SegmentLookupError
from .schemas import SegmentResponse

logger = logging.getLogger(__name__)

USER_SEGMENT_PATH = "/api/v1/user_segment"


class SegmentClient(Protocol):
    async def resolve_segment(self, customer_id: str) -> str:
        ...


class HttpSegmentClient:
    """Resolves a customer's segment through the segment service over HTTP.

    Holds one pooled httpx.AsyncClient; call aclose() on shutdown.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def resolve_segment(self, customer_id: str) -> str:
        try:
            response = await self._client.get(USER_SEGMENT_PATH, params={"user_id": customer_id})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SegmentLookupError(
                f"Segment service answered {e.response.status_code} for customer {customer_id}"
            ) from e
        except httpx.HTTPError as e:
            raise SegmentLookupError(f"Segment service unreachable: {e}") from e

        try:
            segment = SegmentResponse.model_validate(response.json()).segment
        except (ValueError, ValidationError) as e:
            raise SegmentLookupError(f"Malformed segment response for customer {customer_id}") from e

        logger.debug(f"Customer {customer_id} resolved to segment {segment}")
        return segment
