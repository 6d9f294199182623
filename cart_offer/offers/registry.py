import logging
import threading
from typing import Dict, List, Optional, Tuple

from cart_offer.errors import DuplicateOffer
from .schemas import Offer

logger = logging.getLogger(__name__)

OfferKey = Tuple[int, str]


class OfferRegistry:
    """Keyed in-memory store of active offers.

    Holds at most one offer per (restaurant_id, segment). Writes are
    serialized by a single lock and publish a new snapshot mapping, so a
    reader always sees either none or all of the keys of an offer. Reads
    take no lock.
    """

    def __init__(self):
        self._write_lock = threading.Lock()
        self._snapshot: Dict[OfferKey, Offer] = {}

    def insert(self, offer: Offer) -> None:
        keys = offer.registry_keys()
        with self._write_lock:
            current = self._snapshot
            taken = [key for key in keys if key in current]
            if taken:
                raise DuplicateOffer(taken)

            updated = dict(current)
            for key in keys:
                updated[key] = offer
            self._snapshot = updated

        logger.debug(f"Registered offer {offer.uid} under {len(keys)} key(s)")

    def lookup(self, restaurant_id: int, segment: str) -> Optional[Offer]:
        return self._snapshot.get((restaurant_id, segment))

    def offers(self, restaurant_id: Optional[int] = None) -> List[Offer]:
        """Distinct active offers in insertion order, optionally for one restaurant."""
        seen = set()
        result = []
        for (key_restaurant, _), offer in self._snapshot.items():
            if restaurant_id is not None and key_restaurant != restaurant_id:
                continue
            if offer.uid in seen:
                continue
            seen.add(offer.uid)
            result.append(offer)
        return result

    def __len__(self) -> int:
        return len(self._snapshot)
