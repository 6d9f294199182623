from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cart_offer import create_app
from cart_offer.errors import SegmentLookupError
from cart_offer.offers.registry import OfferRegistry


class StubSegmentClient:
    """Maps customer ids to segments; unknown customers fail the lookup."""

    def __init__(self, segments: dict[str, str] | None = None) -> None:
        self.segments = dict(segments or {})
        self.calls: list[str] = []

    async def resolve_segment(self, customer_id: str) -> str:
        self.calls.append(customer_id)
        try:
            return self.segments[customer_id]
        except KeyError:
            raise SegmentLookupError(f"no segment for {customer_id}") from None


@pytest.fixture
def registry() -> OfferRegistry:
    return OfferRegistry()


@pytest.fixture
def segment_client() -> StubSegmentClient:
    return StubSegmentClient({"1": "p1", "2": "p2", "3": "p3"})


@pytest.fixture
def client(registry: OfferRegistry, segment_client: StubSegmentClient) -> TestClient:
    app = create_app(registry=registry, segment_client=segment_client)
    return TestClient(app)
