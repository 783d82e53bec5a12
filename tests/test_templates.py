from __future__ import annotations

from product_copy.common.templates import (
    basic_fallback,
    basic_prompt,
    detailed_fallback,
    detailed_prompt,
    price_clause,
    render_prompt,
)


def test_render_prompt_substitution() -> None:
    tpl = "Hello {{name}} from {{place}}!"
    out = render_prompt(tpl, name="world", place="here")
    assert out == "Hello world from here!"


def test_basic_prompt_contains_product_name() -> None:
    prompt = basic_prompt("Wireless Headphones")
    assert "'Wireless Headphones'" in prompt
    assert "50-100 words" in prompt
    assert "{{" not in prompt


def test_detailed_prompt_embeds_category_and_price() -> None:
    prompt = detailed_prompt("Gaming Laptop", "Electronics", 1299.99)
    assert "a Electronics product called 'Gaming Laptop' priced at $1299.99." in prompt
    assert "specific to the Electronics category" in prompt


def test_detailed_prompt_without_category() -> None:
    prompt = detailed_prompt("Gaming Laptop", None, None)
    assert "for a product called 'Gaming Laptop'." in prompt
    assert "None" not in prompt
    assert "category" not in prompt


def test_price_clause_two_decimals() -> None:
    assert price_clause(5) == " priced at $5.00"
    assert price_clause(19.999) == " priced at $20.00"
    assert price_clause(None) == ""


def test_basic_fallback_exact() -> None:
    assert basic_fallback("Wireless Headphones") == (
        "Discover the amazing Wireless Headphones - a premium product designed to meet "
        "your needs with exceptional quality and value."
    )


def test_detailed_fallback_variants() -> None:
    assert detailed_fallback("X", "Electronics", 1299.99) == (
        "Discover the amazing X in our Electronics collection at an unbeatable price"
        " - a premium product designed to meet your needs with exceptional quality and value."
    )
    no_price = detailed_fallback("X", "Electronics", None)
    assert "unbeatable" not in no_price
    assert "in our Electronics collection -" in no_price
    assert detailed_fallback("X", None, None) == basic_fallback("X")


def test_placeholder_text_in_values_is_kept_literal() -> None:
    prompt = detailed_prompt("Lamp {{category}}", "Home", None)
    assert "called 'Lamp {{category}}'." in prompt
    assert "a Home product" in prompt


def test_render_prompt_leaves_unknown_placeholders() -> None:
    assert render_prompt("{{a}} and {{b}}", a="{{b}}") == "{{b}} and {{b}}"
