from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional, Tuple, Union
import uuid
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class OfferType(str, Enum):
    FLATX = "FLATX"
    FLATPERCENT = "FLATPERCENT"


class OfferCandidate(BaseModel):
    """Raw create-offer payload.

    Fields are untyped so that malformed input reaches the
    validator and is reported as a domain error rather than a schema error.
    """
    restaurant_id: Optional[Any] = None
    offer_type: Optional[Any] = None
    offer_value: Optional[Any] = None
    customer_segment: Optional[Any] = None


class Offer(BaseModel):
    uid: uuid.UUID = Field(default_factory=uuid.uuid4)
    restaurant_id: int
    offer_type: OfferType
    offer_value: int
    customer_segments: Tuple[str, ...]
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)

    def registry_keys(self) -> List[Tuple[int, str]]:
        return [(self.restaurant_id, segment) for segment in self.customer_segments]


class OfferCreatedResponse(BaseModel):
    response_msg: str = "success"
    offer: Offer


class CartCheckoutRequest(BaseModel):
    restaurant_id: StrictInt = Field(gt=0)
    user_id: Union[StrictInt, str]
    cart_value: StrictInt = Field(ge=0)

    @field_validator("user_id")
    @classmethod
    def _normalize_user_id(cls, value: Union[int, str]) -> str:
        value = str(value).strip()
        if not value:
            raise ValueError("user_id must not be empty")
        return value


class AppliedOfferResult(BaseModel):
    cart_value: int
    original_cart_value: int
    discount: int = 0
    segment: str
    offer_applied: Optional[OfferType] = None
