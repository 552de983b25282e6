# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for payment request models."""

import unittest
from decimal import Decimal

from paypal_checkout.core.errors import ValidationError
from paypal_checkout.models.payment_request import Item, PaymentRequest, build_execute_payload


class TestItem(unittest.TestCase):
    def test_to_dict(self):
        item = Item(name="Widget", sku="W-1", price="5.00", currency="USD", quantity=2)
        self.assertEqual(
            item.to_dict(),
            {"name": "Widget", "sku": "W-1", "price": "5.00", "currency": "USD", "quantity": 2},
        )

    def test_default_quantity(self):
        self.assertEqual(Item(name="a", sku="b", price="1.00", currency="EUR").quantity, 1)


class TestPaymentRequest(unittest.TestCase):
    def setUp(self):
        self.payload_args = dict(
            return_url="https://shop.example/return",
            cancel_url="https://shop.example/cancel",
            default_currency="USD",
            default_description="This is the payment description.",
        )

    def test_from_options(self):
        request = PaymentRequest.from_options({"amount": "10.00", "currency": "USD", "description": "Payment for item"})
        self.assertEqual(request.amount, "10.00")
        self.assertEqual(request.currency, "USD")
        self.assertEqual(request.description, "Payment for item")
        self.assertIsNone(request.items)

    def test_from_options_stringifies_amount(self):
        self.assertEqual(PaymentRequest.from_options({"amount": Decimal("12.50")}).amount, "12.50")

    def test_from_options_zero_amount_rejected(self):
        for zero in (0, 0.0, Decimal("0")):
            request = PaymentRequest.from_options({"amount": zero})
            with self.assertRaises(ValidationError):
                request.validate()

    def test_from_options_rejects_non_mapping(self):
        with self.assertRaises(TypeError):
            PaymentRequest.from_options("10.00")

    def test_validate(self):
        PaymentRequest(amount="0.01").validate()
        for missing in (None, ""):
            with self.assertRaises(ValidationError) as ctx:
                PaymentRequest(amount=missing).validate()
            self.assertEqual(ctx.exception.code, "validation_error")
            self.assertEqual(ctx.exception.subcode, "validation_amount_missing")

    def test_payload_redirect_urls(self):
        payload = PaymentRequest(amount="10.00").to_payload(**self.payload_args)
        self.assertEqual(payload["intent"], "sale")
        self.assertEqual(payload["payer"], {"payment_method": "paypal"})
        self.assertEqual(
            payload["redirect_urls"],
            {"return_url": "https://shop.example/return", "cancel_url": "https://shop.example/cancel"},
        )

    def test_payload_default_item_uses_request_currency(self):
        payload = PaymentRequest(amount="3.00", currency="JPY").to_payload(**self.payload_args)
        transaction = payload["transactions"][0]
        self.assertEqual(
            transaction["item_list"]["items"],
            [{"name": "item", "sku": "item", "price": "3.00", "currency": "JPY", "quantity": 1}],
        )
        self.assertEqual(transaction["amount"], {"currency": "JPY", "total": "3.00"})
        self.assertEqual(transaction["description"], "This is the payment description.")

    def test_payload_explicit_empty_items_kept(self):
        request = PaymentRequest.from_options({"amount": "4.00", "items": []})
        payload = request.to_payload(**self.payload_args)
        self.assertEqual(payload["transactions"][0]["item_list"], {"items": []})

    def test_payload_items_none_generates_default(self):
        request = PaymentRequest.from_options({"amount": "4.00", "items": None})
        items = request.to_payload(**self.payload_args)["transactions"][0]["item_list"]["items"]
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]["price"], "4.00")

    def test_payload_mixed_items(self):
        request = PaymentRequest(
            amount="7.00",
            items=[
                Item(name="A", sku="A-1", price="5.00", currency="USD"),
                {"name": "B", "sku": "B-1", "price": "1.00", "currency": "USD", "quantity": 2},
            ],
        )
        items = request.to_payload(**self.payload_args)["transactions"][0]["item_list"]["items"]
        self.assertEqual(items[0], {"name": "A", "sku": "A-1", "price": "5.00", "currency": "USD", "quantity": 1})
        self.assertEqual(items[1]["quantity"], 2)


def test_build_execute_payload():
    assert build_execute_payload("PAYER-1", "USD") == {
        "payer_id": "PAYER-1",
        "transactions": [{"amount": {"currency": "USD"}}],
    }
