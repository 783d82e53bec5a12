"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator

class GenerationRequest(BaseModel):
    """Input for one description generation call."""
    product_name: str = Field(..., min_length=1, examples=["Wireless Headphones"])
    category: str | None = Field(None, examples=["Electronics"])
    price: float | None = Field(None, gt=0, examples=[1299.99])

    @field_validator("product_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("product_name must not be blank")
        return value

@dataclass
class ProviderReply:
    """Provider reply text plus usage metadata."""
    text: str
    prompt_tokens: int | None
    completion_tokens: int | None
    latency_ms: int
