"""FastAPI app exposing the description generator.

Endpoints:
- GET /health
- GET /description?productName=...
- GET /description/detailed?productName=...&category=...&price=...
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, Query
from fastapi.responses import PlainTextResponse

from product_copy.common.config import load_settings
from product_copy.common.logging_setup import setup_logging
from product_copy.generator import DescriptionGenerator
from product_copy.provider.chat_client import ChatProvider

LOGGER = logging.getLogger("productcopy.app")
setup_logging()

SETTINGS = load_settings()
GENERATOR = DescriptionGenerator(ChatProvider(SETTINGS))

app = FastAPI(
    title="Product Copy",
    description="AI-powered marketing content generation",
)

@app.on_event("startup")
def _check_provider_on_startup() -> None:
    """Warn when the provider cannot be authenticated; requests will serve fallback copy."""
    if not SETTINGS.api_key:
        LOGGER.warning("PROVIDER_API_KEY is not set; descriptions will use fallback text")
    LOGGER.info("Using model %s at %s", SETTINGS.model_id, SETTINGS.endpoint)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": SETTINGS.model_id}

@app.get("/description", response_class=PlainTextResponse, tags=["Marketing"])
def describe(
    product_name: str = Query(..., alias="productName", min_length=1, pattern=r"\S", description="Product name"),
) -> str:
    """Generate an AI-powered marketing description for a product."""
    LOGGER.info("Description requested for '%s'", product_name)
    return GENERATOR.generate_basic(product_name)

@app.get("/description/detailed", response_class=PlainTextResponse, tags=["Marketing"])
def describe_detailed(
    product_name: str = Query(..., alias="productName", min_length=1, pattern=r"\S", description="Product name"),
    category: str | None = Query(None, description="Product category"),
    price: float | None = Query(None, gt=0, description="Product price"),
) -> str:
    """Generate a marketing description with category and price context."""
    LOGGER.info("Detailed description requested for '%s' (category=%s, price=%s)", product_name, category, price)
    return GENERATOR.generate_detailed(product_name, category, price)
