# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from ..common.constants import (
    DEFAULT_CANCEL_URL,
    DEFAULT_CURRENCY,
    DEFAULT_DESCRIPTION,
    DEFAULT_RETURN_URL,
    ENV_CANCEL_URL,
    ENV_CURRENCY,
    ENV_MODE,
    ENV_RETURN_URL,
    MODE_SANDBOX,
)


@dataclass(frozen=True)
class PayPalConfig:
    """
    Configuration settings for PayPal checkout operations.

    Credentials are not part of the configuration; pass them to
    :class:`~paypal_checkout.client.PayPal` directly.

    :param mode: PayPal environment, ``"sandbox"`` or ``"live"`` (default: ``"sandbox"``).
    :type mode: str
    :param return_url: URL PayPal redirects the buyer to after approving a payment.
    :type return_url: str
    :param cancel_url: URL PayPal redirects the buyer to after cancelling a payment.
    :type cancel_url: str
    :param currency: Currency applied when a request does not name one (default: ``"USD"``).
    :type currency: str
    :param description: Transaction description applied when a request does not supply one.
    :type description: str
    :param proxies: Optional ``requests``-style proxy mapping forwarded to the PayPal SDK.
    :type proxies: dict or None
    """
    mode: str = MODE_SANDBOX
    return_url: str = DEFAULT_RETURN_URL
    cancel_url: str = DEFAULT_CANCEL_URL
    currency: str = DEFAULT_CURRENCY
    description: str = DEFAULT_DESCRIPTION

    # Transport tuning handed to paypalrestsdk.Api
    proxies: Optional[Dict[str, str]] = None

    @classmethod
    def from_env(cls) -> "PayPalConfig":
        """
        Create a configuration instance from ``PAYPAL_*`` environment variables.

        Unset or empty variables fall back to the class defaults.

        :return: Configuration instance.
        :rtype: ~paypal_checkout.core.config.PayPalConfig
        """
        return cls(
            mode=os.environ.get(ENV_MODE) or MODE_SANDBOX,
            return_url=os.environ.get(ENV_RETURN_URL) or DEFAULT_RETURN_URL,
            cancel_url=os.environ.get(ENV_CANCEL_URL) or DEFAULT_CANCEL_URL,
            currency=os.environ.get(ENV_CURRENCY) or DEFAULT_CURRENCY,
        )
