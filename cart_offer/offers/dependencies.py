from fastapi import Depends, Request

from cart_offer.segments.client import SegmentClient
from .registry import OfferRegistry
from .service import OfferService


def get_registry(request: Request) -> OfferRegistry:
    return request.app.state.offer_registry


def get_segment_client(request: Request) -> SegmentClient:
    return request.app.state.segment_client


def get_offer_service(
    registry: OfferRegistry = Depends(get_registry),
    segment_client: SegmentClient = Depends(get_segment_client),
) -> OfferService:
    return OfferService(registry, segment_client)
