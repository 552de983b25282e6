# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
PayPal checkout wrapper.

A small client over the PayPal REST SDK for the create, approve and execute
steps of a PayPal-wallet payment.
"""

from .client import PayPal
from .core.config import PayPalConfig
from .core.errors import ApprovalUrlNotFoundError, PaymentError, PayPalError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "PayPal",
    "PayPalConfig",
    "PayPalError",
    "ValidationError",
    "PaymentError",
    "ApprovalUrlNotFoundError",
    "__version__",
]
