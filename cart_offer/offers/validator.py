from typing import Any, List

from cart_offer.errors import (
    InvalidRestaurant,
    UnknownOfferType,
    InvalidOfferValue,
    MissingSegments
)
from .schemas import Offer, OfferCandidate, OfferType


def _is_int(value: Any) -> bool:
    # bool is an int subclass; True must not pass as restaurant 1
    return isinstance(value, int) and not isinstance(value, bool)


def _clean_segments(raw: Any) -> List[str]:
    if raw is None or not isinstance(raw, (list, tuple)):
        raise MissingSegments()

    segments: List[str] = []
    seen = set()
    for label in raw:
        if not isinstance(label, str):
            raise MissingSegments(f"customer segment labels must be strings, got {label!r}")
        label = label.strip()
        if label and label not in seen:
            seen.add(label)
            segments.append(label)

    if not segments:
        raise MissingSegments()
    return segments


def validate(candidate: OfferCandidate) -> Offer:
    """
    Check a create-offer candidate and return the valid Offer.
    Rules run in order and the first failure is raised.
    """
    restaurant_id = candidate.restaurant_id
    if not _is_int(restaurant_id) or restaurant_id <= 0:
        raise InvalidRestaurant()

    try:
        offer_type = OfferType(candidate.offer_type)
    except ValueError:
        raise UnknownOfferType(f"Unknown offer_type {candidate.offer_type!r}, expected one of FLATX, FLATPERCENT")

    offer_value = candidate.offer_value
    if not _is_int(offer_value) or offer_value < 0:
        raise InvalidOfferValue()
    if offer_type == OfferType.FLATPERCENT and offer_value > 100:
        raise InvalidOfferValue("offer_value for FLATPERCENT must be between 0 and 100")

    segments = _clean_segments(candidate.customer_segment)

    return Offer(
        restaurant_id=restaurant_id,
        offer_type=offer_type,
        offer_value=offer_value,
        customer_segments=tuple(segments),
    )
