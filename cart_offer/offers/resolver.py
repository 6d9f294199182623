from .registry import OfferRegistry
from .schemas import AppliedOfferResult, CartCheckoutRequest, Offer, OfferType


def discounted_value(cart_value: int, offer: Offer) -> int:
    if offer.offer_type == OfferType.FLATX:
        final_value = cart_value - offer.offer_value
    else:
        # floor division never over-discounts
        final_value = cart_value - (cart_value * offer.offer_value) // 100
    return max(0, final_value)


class OfferResolver:
    def __init__(self, registry: OfferRegistry):
        self.registry = registry

    def apply(self, request: CartCheckoutRequest, segment: str) -> AppliedOfferResult:
        offer = self.registry.lookup(request.restaurant_id, segment)
        if offer is None:
            return AppliedOfferResult(
                cart_value=request.cart_value,
                original_cart_value=request.cart_value,
                segment=segment,
            )

        final_value = discounted_value(request.cart_value, offer)
        return AppliedOfferResult(
            cart_value=final_value,
            original_cart_value=request.cart_value,
            discount=request.cart_value - final_value,
            segment=segment,
            offer_applied=offer.offer_type,
        )
