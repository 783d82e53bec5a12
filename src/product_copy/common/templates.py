"""Prompt templating and fallback copy helpers."""
from __future__ import annotations
import re

BASIC_TEMPLATE = (
    "Create an engaging marketing description for a product called '{{product_name}}'. "
    "The description should be compelling, highlight key benefits, and encourage customers to purchase. "
    "Keep it between 50-100 words and make it sound professional yet appealing."
)

DETAILED_TEMPLATE = (
    "Create an engaging marketing description for a {{category}} product called "
    "'{{product_name}}'{{price_clause}}. "
    "The description should be compelling, highlight key benefits specific to the {{category}} category, "
    "and encourage customers to purchase. Include value proposition if price is mentioned. "
    "Keep it between 50-100 words and make it sound professional yet appealing."
)

# Used by the detailed variant when no category was supplied.
UNCATEGORIZED_TEMPLATE = (
    "Create an engaging marketing description for a product called "
    "'{{product_name}}'{{price_clause}}. "
    "The description should be compelling, highlight key benefits, "
    "and encourage customers to purchase. Include value proposition if price is mentioned. "
    "Keep it between 50-100 words and make it sound professional yet appealing."
)

FALLBACK_TAIL = " - a premium product designed to meet your needs with exceptional quality and value."

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

def render_prompt(template: str, **values: str) -> str:
    """
    Render values into the template.

    Args:
        template: Template content containing {{name}} placeholders.
        values: Replacement text keyed by placeholder name.

    Returns:
        Rendered prompt.
    """
    # Single pass so placeholder text inside a value is never expanded.
    return PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), template)

def price_clause(price: float | None) -> str:
    if price is None:
        return ""
    return f" priced at ${price:.2f}"

def basic_prompt(product_name: str) -> str:
    return render_prompt(BASIC_TEMPLATE, product_name=product_name)

def detailed_prompt(product_name: str, category: str | None, price: float | None) -> str:
    template = DETAILED_TEMPLATE if category else UNCATEGORIZED_TEMPLATE
    return render_prompt(
        template,
        product_name=product_name,
        category=category or "",
        price_clause=price_clause(price),
    )

def basic_fallback(product_name: str) -> str:
    """Static copy returned when the provider cannot produce a description."""
    return f"Discover the amazing {product_name}{FALLBACK_TAIL}"

def detailed_fallback(product_name: str, category: str | None, price: float | None) -> str:
    """
    Static copy for the detailed variant.

    Mentions the category collection when known, and the price only as
    "at an unbeatable price" (never the figure itself).
    """
    parts = [f"Discover the amazing {product_name}"]
    if category:
        parts.append(f" in our {category} collection")
    if price is not None:
        parts.append(" at an unbeatable price")
    parts.append(FALLBACK_TAIL)
    return "".join(parts)
