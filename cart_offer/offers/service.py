import logging
from typing import List, Optional

from cart_offer.errors import (
    DuplicateOffer,
    OfferValidationError,
    SegmentLookupError,
    SegmentUnresolved
)
from cart_offer.segments.client import SegmentClient
from .registry import OfferRegistry
from .resolver import OfferResolver
from .schemas import AppliedOfferResult, CartCheckoutRequest, Offer, OfferCandidate
from .validator import validate

logger = logging.getLogger(__name__)


class OfferService:
    def __init__(self, registry: OfferRegistry, segment_client: SegmentClient):
        self.registry = registry
        self.segment_client = segment_client
        self.resolver = OfferResolver(registry)

    def create_offer(self, candidate: OfferCandidate) -> Offer:
        """
        Validate the candidate and register it. Raises an OfferValidationError
        for malformed input and DuplicateOffer when any of its
        (restaurant, segment) keys already has an active offer.
        """
        try:
            offer = validate(candidate)
        except OfferValidationError as e:
            logger.info(f"Rejected offer for restaurant {candidate.restaurant_id!r}: {e}")
            raise

        try:
            self.registry.insert(offer)
        except DuplicateOffer as e:
            logger.info(f"Duplicate offer for restaurant {offer.restaurant_id}: {e}")
            raise

        logger.info(
            f"Created {offer.offer_type.value} offer {offer.uid} for restaurant {offer.restaurant_id} "
            f"with value {offer.offer_value} on {len(offer.customer_segments)} segment(s)"
        )
        return offer

    def list_offers(self, restaurant_id: Optional[int] = None) -> List[Offer]:
        return self.registry.offers(restaurant_id)

    async def apply_offer(self, request: CartCheckoutRequest) -> AppliedOfferResult:
        try:
            segment = await self.segment_client.resolve_segment(request.user_id)
        except SegmentLookupError as e:
            logger.warning(f"Segment lookup failed for customer {request.user_id}: {e}")
            raise SegmentUnresolved(request.user_id, str(e)) from e

        result = self.resolver.apply(request, segment)
        logger.info(
            f"Cart for customer {request.user_id} at restaurant {request.restaurant_id} "
            f"({segment}): {result.original_cart_value} -> {result.cart_value}"
        )
        return result
