# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the PayPal checkout wrapper.

This module contains the foundational components: configuration and error handling.
"""

from .config import PayPalConfig
from .errors import ApprovalUrlNotFoundError, PaymentError, PayPalError, ValidationError

__all__ = [
    "PayPalConfig",
    "PayPalError",
    "ValidationError",
    "PaymentError",
    "ApprovalUrlNotFoundError",
]
