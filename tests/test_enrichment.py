"""
Catalog Enrichment Tests
========================

Verifies:
- Items without product_image get the catalog image for their product_code.
- Items that already have an image, have no code, or have no match are untouched.
- The input order is not mutated.
"""
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from furni_orders.enrichment import enrich, enrich_with_count, index_catalog
from furni_orders.models import CatalogProduct, Order, OrderItem


def _catalog():
    return [
        CatalogProduct(product_code="SOFA-01", image="https://img/sofa.jpg"),
        CatalogProduct(product_code="CHAIR-02", image="https://img/chair.jpg"),
        CatalogProduct(product_code="TABLE-03"),
    ]


class TestEnrich(unittest.TestCase):
    def test_missing_image_filled_from_catalog(self):
        order = Order(items=[OrderItem(product_code="SOFA-01")])
        result = enrich(order, _catalog())
        self.assertEqual(result.items[0].product_image, "https://img/sofa.jpg")

    def test_existing_image_kept(self):
        order = Order(items=[OrderItem(product_code="SOFA-01", product_image="own.jpg")])
        result = enrich(order, _catalog())
        self.assertEqual(result.items[0].product_image, "own.jpg")

    def test_no_match_unchanged(self):
        order = Order(items=[OrderItem(product_code="BED-99"), OrderItem()])
        result = enrich(order, _catalog())
        self.assertIsNone(result.items[0].product_image)
        self.assertIsNone(result.items[1].product_image)

    def test_catalog_entry_without_image(self):
        order = Order(items=[OrderItem(product_code="TABLE-03")])
        result = enrich(order, _catalog())
        self.assertIsNone(result.items[0].product_image)

    def test_input_not_mutated(self):
        order = Order(items=[OrderItem(product_code="CHAIR-02")])
        result = enrich(order, _catalog())
        self.assertIsNone(order.items[0].product_image)
        self.assertEqual(result.items[0].product_image, "https://img/chair.jpg")

    def test_item_order_and_count_preserved(self):
        order = Order(items=[
            OrderItem(product_code="CHAIR-02"),
            OrderItem(product_code="BED-99"),
            OrderItem(product_code="SOFA-01", product_image="own.jpg"),
        ])
        result, filled = enrich_with_count(order, _catalog())
        self.assertEqual(filled, 1)
        self.assertEqual([i.product_code for i in result.items], ["CHAIR-02", "BED-99", "SOFA-01"])

    def test_other_fields_preserved(self):
        order = Order(sales_order_ref="SO-7", items=[
            OrderItem(product_code="SOFA-01", images=["a.jpg"], quantity=4),
        ])
        result = enrich(order, _catalog())
        self.assertEqual(result.sales_order_ref, "SO-7")
        self.assertEqual(result.items[0].images, ["a.jpg"])
        self.assertEqual(result.items[0].quantity, 4)

    def test_empty_order(self):
        self.assertEqual(enrich(Order(), _catalog()).items, [])


class TestIndexCatalog(unittest.TestCase):
    def test_first_entry_wins(self):
        index = index_catalog([
            CatalogProduct(product_code="A", image="first.jpg"),
            CatalogProduct(product_code="A", image="second.jpg"),
            CatalogProduct(image="orphan.jpg"),
        ])
        self.assertEqual(list(index), ["A"])
        self.assertEqual(index["A"].image, "first.jpg")


if __name__ == "__main__":
    unittest.main()
