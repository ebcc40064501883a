from fastapi import APIRouter

from .endpoints import health, news, quote

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

# Translated ticker news - /news?symbol=&page=&source=
api_router.include_router(news.router, tags=["news"])

# Stock quotes consumed by the same UI - /quote?symbol=
api_router.include_router(quote.router, tags=["quote"])
