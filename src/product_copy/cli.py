"""Generate a marketing description for one product from the command line."""
from __future__ import annotations
import argparse
import logging

from product_copy.common.config import load_settings
from product_copy.common.logging_setup import setup_logging
from product_copy.generator import DescriptionGenerator
from product_copy.provider.chat_client import ChatProvider

LOGGER = logging.getLogger("productcopy.cli")

def main(argv: list[str] | None = None) -> None:
    setup_logging()
    ap = argparse.ArgumentParser(description="Generate a product marketing description")
    ap.add_argument("--product-name", required=True, help="Product name")
    ap.add_argument("--category", default=None, help="Product category")
    ap.add_argument("--price", type=float, default=None, help="Product price")
    ap.add_argument("--cfg", default=None, help="Config path")
    args = ap.parse_args(argv)

    generator = DescriptionGenerator(ChatProvider(load_settings(args.cfg)))
    if args.category is None and args.price is None:
        text = generator.generate_basic(args.product_name)
    else:
        text = generator.generate_detailed(args.product_name, args.category, args.price)
    LOGGER.info("Generated %s characters", len(text))
    print(text)

if __name__ == "__main__":
    main()
