from __future__ import annotations

import asyncio

import pytest

from cart_offer.errors import DuplicateOffer, SegmentUnresolved, UnknownOfferType
from cart_offer.offers.registry import OfferRegistry
from cart_offer.offers.schemas import CartCheckoutRequest, OfferCandidate, OfferType
from cart_offer.offers.service import OfferService

from .conftest import StubSegmentClient


def _service(registry: OfferRegistry, segment_client: StubSegmentClient) -> OfferService:
    return OfferService(registry, segment_client)


def test_create_then_apply(registry: OfferRegistry, segment_client: StubSegmentClient) -> None:
    service = _service(registry, segment_client)
    offer = service.create_offer(
        OfferCandidate(restaurant_id=1, offer_type="FLATX", offer_value=10, customer_segment=["p1"])
    )
    assert registry.lookup(1, "p1") == offer

    result = asyncio.run(service.apply_offer(CartCheckoutRequest(restaurant_id=1, user_id=1, cart_value=200)))
    assert result.cart_value == 190
    assert result.offer_applied is OfferType.FLATX
    assert segment_client.calls == ["1"]


def test_create_rejects_invalid_and_leaves_registry_empty(
    registry: OfferRegistry, segment_client: StubSegmentClient
) -> None:
    service = _service(registry, segment_client)
    with pytest.raises(UnknownOfferType):
        service.create_offer(
            OfferCandidate(restaurant_id=1, offer_type="UNKNOWN_TYPE", offer_value=10, customer_segment=["p1"])
        )
    assert len(registry) == 0


def test_literal_duplicate_is_rejected(registry: OfferRegistry, segment_client: StubSegmentClient) -> None:
    service = _service(registry, segment_client)
    candidate = OfferCandidate(restaurant_id=503, offer_type="FLATPERCENT", offer_value=15, customer_segment=["p3"])
    first = service.create_offer(candidate)
    with pytest.raises(DuplicateOffer):
        service.create_offer(candidate)
    assert service.list_offers() == [first]


def test_segment_failure_is_surfaced_without_touching_registry(
    registry: OfferRegistry, segment_client: StubSegmentClient
) -> None:
    service = _service(registry, segment_client)
    service.create_offer(OfferCandidate(restaurant_id=1, offer_type="FLATX", offer_value=10, customer_segment=["p1"]))
    before = registry.offers()

    with pytest.raises(SegmentUnresolved) as excinfo:
        asyncio.run(service.apply_offer(CartCheckoutRequest(restaurant_id=1, user_id="unknown", cart_value=200)))

    assert excinfo.value.customer_id == "unknown"
    assert registry.offers() == before
    assert len(registry) == 1
