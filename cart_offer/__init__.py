from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from cart_offer.config import Config
from cart_offer.logging_utils import configure_logging
from cart_offer.offers.registry import OfferRegistry
from cart_offer.offers.routes import offer_router
from cart_offer.segments.client import HttpSegmentClient, SegmentClient

from .errors import register_all_errors
from .middleware import register_middleware

version = "v1"

configure_logging(Config.LOG_LEVEL)


def create_app(
    registry: Optional[OfferRegistry] = None,
    segment_client: Optional[SegmentClient] = None,
) -> FastAPI:
    owned_client = None
    if segment_client is None:
        owned_client = HttpSegmentClient(
            Config.SEGMENT_SERVICE_URL,
            timeout=Config.SEGMENT_LOOKUP_TIMEOUT,
        )
        segment_client = owned_client

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # injected clients belong to the caller
        if owned_client is not None:
            await owned_client.aclose()

    app = FastAPI(
        title = "Cart Offer Service",
        description = "A REST API for creating restaurant offers and applying them to carts",
        version = version,
        lifespan = lifespan,
    )

    # each app owns its registry; it lives as long as the process
    app.state.offer_registry = registry if registry is not None else OfferRegistry()
    app.state.segment_client = segment_client

    register_all_errors(app)
    register_middleware(app)

    app.include_router(offer_router, prefix=f"/api/{version}", tags=['offers'])

    @app.get("/health", tags=['health'])
    async def health():
        return {"status": "ok", "active_offer_keys": len(app.state.offer_registry)}

    return app


app = create_app()
