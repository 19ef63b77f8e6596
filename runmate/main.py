#!/usr/bin/env python3
"""
RunMate - terminal front end for the storefront catalog and admin tables.
"""

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

from runmate.config import AppPaths, AppSettings
from runmate.core.di_container import AppContainer
from runmate.domain import FilterSet, Product
from runmate.managers import ManualSentinel, PagedListManager
from runmate.managers.paged_list_manager import ADMIN_FILTERS
from runmate.utils import format_price, format_rating, truncate_text

logger = logging.getLogger("RunMate.CLI")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="runmate")
    parser.add_argument("--config", help="Path to settings.yml")
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    browse = subparsers.add_parser("browse", help="Scroll through the product catalog")
    browse.add_argument("--search", default="")
    browse.add_argument("--category", default="")
    browse.add_argument("--min-price", default="")
    browse.add_argument("--max-price", default="")
    browse.add_argument("--min-rating", default="")
    browse.add_argument("--pages", type=int, default=1, help="Pages to scroll through")

    admin = subparsers.add_parser("admin", help="Show one page of an admin table")
    admin.add_argument("resource", choices=["products", "orders", "users"])
    admin.add_argument("--token", required=True)
    admin.add_argument("--page", type=int, default=1)
    admin.add_argument("--search", default="")
    admin.add_argument("--category", default="")
    admin.add_argument("--status", default="")

    return parser


def render_product(product: Product, in_cart: bool) -> str:
    stock = f"Stock: {product.stock}" if product.in_stock else "Out of stock"
    cart = " [In Cart]" if in_cart else ""
    description = truncate_text(product.description or "No description available.", 60)
    return (
        f"{product.name} - {format_price(product.price)} "
        f"{format_rating(product.rating)} {stock}{cart}\n    {description}"
    )


async def browse(container: AppContainer, args: argparse.Namespace) -> int:
    listing = container.product_list()
    filters = FilterSet().with_changes(
        search=args.search,
        category=args.category,
        min_price=args.min_price,
        max_price=args.max_price,
        min_rating=args.min_rating,
    )

    sentinel = ManualSentinel()
    listing.start(filters)
    listing.mount_sentinel(sentinel)
    await listing.wait_idle()

    for _ in range(max(args.pages, 1) - 1):
        if not listing.has_more:
            break
        # One page per scroll: hide the sentinel again before the load completes
        sentinel.scroll_into_view()
        sentinel.set_visible(False)
        await listing.wait_idle()

    listing.unmount_sentinel()

    if listing.error:
        print(f"Error: {listing.error}", file=sys.stderr)
    for product in listing.items:
        print(render_product(product, listing.is_in_cart(product.id)))
    print(listing.status_text())
    if listing.has_more:
        print(f"More products available after page {listing.current_page}")
    return 1 if listing.error else 0


async def admin(container: AppContainer, args: argparse.Namespace) -> int:
    table: PagedListManager = container.admin_list(args.resource, token=args.token)
    for key in ("search", "category", "status"):
        value = getattr(args, key)
        if value and key in ADMIN_FILTERS[args.resource]:
            table.filters[key] = value

    await table.refresh()
    if args.page != 1:
        await table.go_to_page(args.page)

    if table.error:
        print(f"Error: {table.error}", file=sys.stderr)
        return 1
    for row in table.items:
        label = row.get("name") or row.get("email") or row.get("status") or ""
        print(f"{row.get('_id', row.get('id', '?'))}  {label}")
    print(f"Page {table.current_page} of {table.total_pages}")
    return 0


async def run(args: argparse.Namespace) -> int:
    paths = AppPaths.default()
    if args.config:
        paths = AppPaths(config_path=Path(args.config), cart_path=paths.cart_path)
    container = AppContainer.create(
        settings=AppSettings.load(str(paths.config_path)), paths=paths
    )
    try:
        if args.command == "browse":
            return await browse(container, args)
        return await admin(container, args)
    finally:
        await container.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("RunMate starting...")

    def signal_handler(sig, frame):
        print("Shutting down...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
