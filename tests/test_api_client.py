"""
Orders REST Client Tests
========================

All HTTP traffic is mocked through a fake requests.Session.
"""
import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock

import requests

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from furni_orders.api_client import ApiError, OrdersApiClient
from furni_orders.models import CatalogProduct, Order


def _response(status_code=200, json_data=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if isinstance(json_data, Exception):
        resp.json.side_effect = json_data
    else:
        resp.json.return_value = json_data
    return resp


def _client(resp=None, side_effect=None):
    session = MagicMock()
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = resp
    return OrdersApiClient(base_url="http://api.test/", timeout=5, session=session), session


class TestGetOrder(unittest.TestCase):
    def test_order_parsed(self):
        client, session = _client(_response(json_data={
            "id": "ord-1",
            "sales_order_ref": "SO-100",
            "items": [{"product_code": "SOFA-01", "quantity": 2}],
        }))
        order = client.get_order("ord-1")
        self.assertIsInstance(order, Order)
        self.assertEqual(order.sales_order_ref, "SO-100")
        self.assertEqual(order.items[0].quantity, 2)
        session.get.assert_called_once_with("http://api.test/api/orders/ord-1", timeout=5)

    def test_http_error_uses_detail(self):
        client, _ = _client(_response(404, {"detail": "Order not found"}))
        with self.assertRaises(ApiError) as ctx:
            client.get_order("missing")
        self.assertEqual(str(ctx.exception), "Order not found")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_http_error_without_json(self):
        client, _ = _client(_response(502, ValueError("no json"), text=""))
        with self.assertRaises(ApiError) as ctx:
            client.get_order("x")
        self.assertEqual(str(ctx.exception), "HTTP 502")

    def test_connection_error_wrapped(self):
        client, _ = _client(side_effect=requests.exceptions.ConnectionError("refused"))
        with self.assertRaises(ApiError):
            client.get_order("x")

    def test_invalid_json(self):
        client, _ = _client(_response(200, ValueError("bad json")))
        with self.assertRaises(ApiError):
            client.get_order("x")

    def test_malformed_order(self):
        client, _ = _client(_response(200, {"items": "not-a-list"}))
        with self.assertRaises(ApiError):
            client.get_order("x")


class TestGetProducts(unittest.TestCase):
    def test_products_parsed(self):
        client, session = _client(_response(json_data=[
            {"product_code": "SOFA-01", "image": "sofa.jpg", "name": "Sofa"},
            {"product_code": "CHAIR-02"},
        ]))
        products = client.get_products()
        self.assertEqual(len(products), 2)
        self.assertIsInstance(products[0], CatalogProduct)
        self.assertEqual(products[0].image, "sofa.jpg")
        session.get.assert_called_once_with("http://api.test/api/products", timeout=5)

    def test_non_list_rejected(self):
        client, _ = _client(_response(json_data={"products": []}))
        with self.assertRaises(ApiError):
            client.get_products()


class TestExportUrl(unittest.TestCase):
    def test_export_pdf_url(self):
        client, session = _client(_response())
        self.assertEqual(client.export_pdf_url("ord-1"), "http://api.test/api/orders/ord-1/export-pdf")
        session.get.assert_not_called()

    def test_context_manager_closes_session(self):
        client, session = _client(_response())
        with client:
            pass
        session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
