from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from .dependencies import get_offer_service
from .schemas import (
    AppliedOfferResult,
    CartCheckoutRequest,
    Offer,
    OfferCandidate,
    OfferCreatedResponse
)
from .service import OfferService

offer_router = APIRouter()


@offer_router.post("/offer", response_model=OfferCreatedResponse, status_code=status.HTTP_200_OK)
async def create_offer(
    candidate: OfferCandidate,
    service: OfferService = Depends(get_offer_service),
):
    offer = service.create_offer(candidate)
    return OfferCreatedResponse(offer=offer)


@offer_router.get("/offer", response_model=List[Offer])
async def list_offers(
    restaurant_id: Optional[int] = Query(None, gt=0),
    service: OfferService = Depends(get_offer_service),
):
    return service.list_offers(restaurant_id)


@offer_router.post("/cart/apply_offer", response_model=AppliedOfferResult)
async def apply_offer(
    request: CartCheckoutRequest,
    service: OfferService = Depends(get_offer_service),
):
    return await service.apply_offer(request)
