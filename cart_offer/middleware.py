from fastapi import FastAPI
from fastapi.requests import Request
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from cart_offer.config import Config

logger = logging.getLogger(__name__)

def register_middleware(app: FastAPI):

    @app.middleware("http")
    async def custom_logging(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)
        processing_time = time.time() - start_time

        client = f"{request.client.host}: {request.client.port}" if request.client else "unknown"
        message = f"{client} - {request.method} - {request.url.path} - {response.status_code} completed after {processing_time}s"

        logger.info(message)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=Config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600  # Cache preflight requests for 10 minutes
    )
