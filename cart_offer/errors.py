from typing import Any, Callable, Iterable, Tuple
from fastapi import FastAPI, status
from fastapi.requests import Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class CartOfferException(Exception):
    """This is the base class for all cart offer errors"""
    pass


# --- Offer validation ---
class OfferValidationError(CartOfferException):
    """The offer candidate does not satisfy the business rules"""
    pass


class InvalidRestaurant(OfferValidationError):
    """restaurant_id is missing or not a positive integer"""
    def __init__(self, message="restaurant_id must be a positive integer"):
        super().__init__(message)


class UnknownOfferType(OfferValidationError):
    """offer_type is not one of the known offer types"""
    def __init__(self, message="offer_type must be one of FLATX, FLATPERCENT"):
        super().__init__(message)


class InvalidOfferValue(OfferValidationError):
    """offer_value is negative, not an integer, or a percentage above 100"""
    def __init__(self, message="offer_value must be a non-negative integer"):
        super().__init__(message)


class MissingSegments(OfferValidationError):
    """customer_segment is null, empty or has no usable label"""
    def __init__(self, message="customer_segment must contain at least one non-empty label"):
        super().__init__(message)


# --- Registry ---
class RegistryError(CartOfferException):
    pass


class DuplicateOffer(RegistryError):
    """An active offer already exists for one of the (restaurant, segment) keys"""
    def __init__(self, keys: Iterable[Tuple[int, str]]):
        self.keys = sorted(keys)
        listed = ", ".join(f"({restaurant_id}, {segment})" for restaurant_id, segment in self.keys)
        super().__init__(f"An offer already exists for: {listed}")


# --- Resolver ---
class ResolveError(CartOfferException):
    pass


class SegmentUnresolved(ResolveError):
    """The customer's segment could not be resolved"""
    def __init__(self, customer_id: str, reason: str = ""):
        self.customer_id = customer_id
        self.reason = reason
        message = f"Could not resolve segment for customer {customer_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SegmentLookupError(CartOfferException):
    """The segment service failed or returned an unusable answer"""
    pass


def create_exception_handler(status_code: int, initial_detail: Any) -> Callable[[Request, Exception], JSONResponse]:
    async def exception_handler(request: Request, exc: CartOfferException):
        content = dict(initial_detail)
        content["detail"] = str(exc)
        return JSONResponse(
            content=content,
            status_code=status_code
        )

    return exception_handler


def register_all_errors(app: FastAPI):
    # Invalid Restaurant
    app.add_exception_handler(
        InvalidRestaurant,
        create_exception_handler(
            status_code=status.HTTP_400_BAD_REQUEST,
            initial_detail={
                "message": "Invalid restaurant id",
                "error_code": "invalid_restaurant",
                "resolution": "Provide restaurant_id as a positive integer"
            }
        )
    )

    # Unknown Offer Type
    app.add_exception_handler(
        UnknownOfferType,
        create_exception_handler(
            status_code=status.HTTP_400_BAD_REQUEST,
            initial_detail={
                "message": "Unknown offer type",
                "error_code": "unknown_offer_type",
                "resolution": "Use FLATX or FLATPERCENT"
            }
        )
    )

    # Invalid Offer Value
    app.add_exception_handler(
        InvalidOfferValue,
        create_exception_handler(
            status_code=status.HTTP_400_BAD_REQUEST,
            initial_detail={
                "message": "Invalid offer value",
                "error_code": "invalid_offer_value",
                "resolution": "Use a non-negative integer, at most 100 for FLATPERCENT"
            }
        )
    )

    # Missing Segments
    app.add_exception_handler(
        MissingSegments,
        create_exception_handler(
            status_code=status.HTTP_400_BAD_REQUEST,
            initial_detail={
                "message": "Customer segments are required",
                "error_code": "missing_segments",
                "resolution": "Provide at least one non-empty customer segment"
            }
        )
    )

    # Duplicate Offer
    app.add_exception_handler(
        DuplicateOffer,
        create_exception_handler(
            status_code=status.HTTP_409_CONFLICT,
            initial_detail={
                "message": "Offer already exists",
                "error_code": "duplicate_offer"
            }
        )
    )

    # Segment Unresolved
    app.add_exception_handler(
        SegmentUnresolved,
        create_exception_handler(
            status_code=status.HTTP_502_BAD_GATEWAY,
            initial_detail={
                "message": "Customer segment could not be resolved",
                "error_code": "segment_unresolved",
                "resolution": "Please try again later"
            }
        )
    )

    @app.exception_handler(500)
    async def internal_server_error_handler(request, exc):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "Oops, something went wrong. Please try again later",
                "error_code": "server_error"
            }
        )
