# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request models for the PayPal checkout wrapper.

- :class:`~paypal_checkout.models.payment_request.PaymentRequest`: Options for creating a payment.
- :class:`~paypal_checkout.models.payment_request.Item`: A transaction item.

Import directly from the module files.
"""

__all__ = []
