"""
Catalog image reconciliation.

Fills ``product_image`` on order items that have none, using the image of the
catalog product sharing the item's ``product_code``. The input order is never
mutated; a new order is returned.
"""
from __future__ import annotations

from typing import Dict, Iterable, Tuple

from furni_orders.models import CatalogProduct, Order


def index_catalog(catalog: Iterable[CatalogProduct]) -> Dict[str, CatalogProduct]:
    """Map product_code -> first catalog product carrying that code."""
    index: Dict[str, CatalogProduct] = {}
    for product in catalog:
        if product.product_code and product.product_code not in index:
            index[product.product_code] = product
    return index


def enrich_with_count(order: Order, catalog: Iterable[CatalogProduct]) -> Tuple[Order, int]:
    """Like :func:`enrich`, also returning how many items were filled."""
    index = index_catalog(catalog)
    filled = 0
    items = []
    for item in order.items:
        if not item.product_image and item.product_code:
            product = index.get(item.product_code)
            if product and product.image:
                item = item.model_copy(update={"product_image": product.image})
                filled += 1
        items.append(item)
    return order.model_copy(update={"items": items}), filled


def enrich(order: Order, catalog: Iterable[CatalogProduct]) -> Order:
    """Return a copy of ``order`` with missing item images taken from the catalog."""
    enriched, _ = enrich_with_count(order, catalog)
    return enriched
