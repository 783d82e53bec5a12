"""Marketing description generation with static fallback copy."""
from __future__ import annotations
import logging
from typing import Protocol

from product_copy.common.schema import GenerationRequest
from product_copy.common.templates import (
    basic_fallback,
    basic_prompt,
    detailed_fallback,
    detailed_prompt,
)

LOGGER = logging.getLogger("productcopy.generator")

class TextProvider(Protocol):
    def generate(self, prompt: str) -> str: ...

class DescriptionGenerator:
    """
    Builds prompts for a product and asks the provider for copy.

    Every call makes exactly one provider request. Any failure is logged and
    replaced with deterministic fallback text, so a string is always returned.
    """

    def __init__(self, provider: TextProvider) -> None:
        self.provider = provider

    def _ask(self, prompt: str, fallback: str, product_name: str) -> str:
        try:
            text = self.provider.generate(prompt)
        except Exception as e:
            LOGGER.warning("Provider call failed for '%s'; using fallback: %s", product_name, e)
            return fallback
        if not text or not text.strip():
            LOGGER.warning("Provider returned empty text for '%s'; using fallback", product_name)
            return fallback
        return text.strip()

    def generate_basic(self, product_name: str) -> str:
        req = GenerationRequest(product_name=product_name)
        return self._ask(
            basic_prompt(req.product_name),
            basic_fallback(req.product_name),
            req.product_name,
        )

    def generate_detailed(
        self,
        product_name: str,
        category: str | None = None,
        price: float | None = None,
    ) -> str:
        req = GenerationRequest(product_name=product_name, category=category, price=price)
        return self._ask(
            detailed_prompt(req.product_name, req.category, req.price),
            detailed_fallback(req.product_name, req.category, req.price),
            req.product_name,
        )
