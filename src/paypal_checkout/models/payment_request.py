# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Request models for PayPal payment creation and execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from ..common.constants import (
    DEFAULT_ITEM_NAME,
    DEFAULT_ITEM_SKU,
    INTENT_SALE,
    PAYMENT_METHOD_PAYPAL,
)
from ..core._error_codes import VALIDATION_AMOUNT_MISSING
from ..core.errors import ValidationError

__all__ = ["Item", "PaymentRequest", "build_execute_payload"]


@dataclass(frozen=True)
class Item:
    """
    A single line of a transaction's item list.

    :param name: Item name shown to the buyer.
    :type name: str
    :param sku: Stock keeping unit.
    :type sku: str
    :param price: Unit price as a decimal string, e.g. ``"10.00"``.
    :type price: str
    :param currency: Three-letter currency code.
    :type currency: str
    :param quantity: Number of units (default: 1).
    :type quantity: int

    Example::

        Item(name="Widget", sku="W-1", price="5.00", currency="USD", quantity=2)
    """

    name: str
    sku: str
    price: str
    currency: str
    quantity: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sku": self.sku,
            "price": self.price,
            "currency": self.currency,
            "quantity": self.quantity,
        }


@dataclass
class PaymentRequest:
    """
    Options for creating a PayPal payment.

    Only ``amount`` is required. Missing ``currency`` and ``description`` are
    filled in from the client configuration when the payload is built. When
    ``items`` is ``None`` a single item priced at ``amount`` is generated; an
    explicit empty list is sent as is.

    :param amount: Transaction total as a decimal string, e.g. ``"10.00"``.
    :type amount: str
    :param currency: Three-letter currency code.
    :type currency: str or None
    :param description: Transaction description.
    :type description: str or None
    :param items: Item list; :class:`Item` instances or plain dicts in the SDK item shape.
    :type items: list or None
    """

    amount: Optional[str]
    currency: Optional[str] = None
    description: Optional[str] = None
    items: Optional[List[Union[Item, Dict[str, Any]]]] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "PaymentRequest":
        """
        Build a request from an options mapping.

        :param options: Mapping with ``amount`` and optional ``currency``, ``description``, ``items``.
        :type options: ~typing.Mapping
        :return: The request.
        :rtype: PaymentRequest
        :raises TypeError: If ``options`` is not a mapping.
        """
        if not isinstance(options, Mapping):
            raise TypeError("options must be a PaymentRequest or a mapping")
        amount = options.get("amount")
        items = options.get("items")
        return cls(
            # Falsy amounts such as 0 stay falsy so validate() rejects them
            amount=amount if not amount or isinstance(amount, str) else str(amount),
            currency=options.get("currency"),
            description=options.get("description"),
            items=None if items is None else list(items),
        )

    def validate(self) -> None:
        """
        :raises ~paypal_checkout.core.errors.ValidationError: If ``amount`` is missing or empty.
        """
        if not self.amount:
            raise ValidationError("amount is required", subcode=VALIDATION_AMOUNT_MISSING)

    def to_payload(
        self,
        *,
        return_url: str,
        cancel_url: str,
        default_currency: str,
        default_description: str,
    ) -> Dict[str, Any]:
        """
        Build the ``POST /v1/payments/payment`` body for a PayPal-wallet sale.

        :return: Payload accepted by ``paypalrestsdk.Payment``.
        :rtype: dict
        """
        currency = self.currency or default_currency
        if self.items is not None:
            items = [i.to_dict() if isinstance(i, Item) else i for i in self.items]
        else:
            items = [
                Item(
                    name=DEFAULT_ITEM_NAME,
                    sku=DEFAULT_ITEM_SKU,
                    price=self.amount,
                    currency=currency,
                ).to_dict()
            ]
        return {
            "intent": INTENT_SALE,
            "payer": {"payment_method": PAYMENT_METHOD_PAYPAL},
            "redirect_urls": {
                "return_url": return_url,
                "cancel_url": cancel_url,
            },
            "transactions": [
                {
                    "item_list": {"items": items},
                    "amount": {"currency": currency, "total": self.amount},
                    "description": self.description or default_description,
                }
            ],
        }


def build_execute_payload(payer_id: str, currency: str) -> Dict[str, Any]:
    """Build the ``POST /v1/payments/payment/{id}/execute`` body."""
    return {
        "payer_id": payer_id,
        "transactions": [{"amount": {"currency": currency}}],
    }
