# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for PayPal REST API payloads.

These constants define the literal values the v1 Payments API expects in
create and execute request bodies, plus the defaults applied when a caller
does not supply its own.
"""

# Environments accepted by paypalrestsdk.Api
MODE_SANDBOX = "sandbox"
MODE_LIVE = "live"
VALID_MODES = (MODE_SANDBOX, MODE_LIVE)

# Payment request literals
INTENT_SALE = "sale"
"""Immediate capture of funds once the buyer approves and the payment is executed."""

PAYMENT_METHOD_PAYPAL = "paypal"
"""Buyer pays with a PayPal account and must visit the approval URL."""

# Defaults
DEFAULT_CURRENCY = "USD"
DEFAULT_DESCRIPTION = "This is the payment description."
DEFAULT_RETURN_URL = "https://return.url"
DEFAULT_CANCEL_URL = "https://cancel.url"
DEFAULT_ITEM_NAME = "item"
DEFAULT_ITEM_SKU = "item"

# Environment variable names read by from_env helpers
ENV_CLIENT_ID = "PAYPAL_CLIENT_ID"
ENV_CLIENT_SECRET = "PAYPAL_CLIENT_SECRET"
ENV_MODE = "PAYPAL_MODE"
ENV_RETURN_URL = "PAYPAL_RETURN_URL"
ENV_CANCEL_URL = "PAYPAL_CANCEL_URL"
ENV_CURRENCY = "PAYPAL_CURRENCY"
