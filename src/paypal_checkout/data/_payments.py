# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Internal adapter over the PayPal REST SDK.

:class:`_PaymentsClient` owns one ``paypalrestsdk.Api`` per wrapper client and
issues the three Payments API calls the wrapper needs. Errors the SDK raises
are logged and re-raised unchanged; failures the SDK reports through a
resource's ``error`` attribute are turned into
:class:`~paypal_checkout.core.errors.PaymentError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import paypalrestsdk
import requests
from paypalrestsdk import exceptions as paypal_exceptions

from ..core._error_codes import PAYMENT_CREATE_FAILED, PAYMENT_EXECUTE_FAILED, PAYMENT_FIND_FAILED
from ..core.errors import PaymentError

_logger = logging.getLogger(__name__)

# Exceptions the SDK (or its requests transport) raises instead of returning an error body
SDK_ERRORS = (
    paypal_exceptions.ConnectionError,
    paypal_exceptions.MissingConfig,
    requests.exceptions.RequestException,
)


class _PaymentsClient:
    """
    Payments API client bound to a single set of credentials.

    :param client_id: PayPal REST app client id.
    :type client_id: str
    :param client_secret: PayPal REST app secret.
    :type client_secret: str
    :param mode: ``"sandbox"`` or ``"live"``.
    :type mode: str
    :param proxies: Optional ``requests``-style proxy mapping.
    :type proxies: dict or None
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        mode: str,
        proxies: Optional[Dict[str, str]] = None,
    ) -> None:
        options: Dict[str, Any] = {
            "mode": mode,
            "client_id": client_id,
            "client_secret": client_secret,
        }
        if proxies:
            options["proxies"] = dict(proxies)
        self.mode = mode
        self._api = paypalrestsdk.Api(options)

    def _create(self, payload: Dict[str, Any]) -> paypalrestsdk.Payment:
        """Create a payment; returns the SDK resource populated with PayPal's response."""
        payment = paypalrestsdk.Payment(payload, api=self._api)
        _logger.debug(f"create payment ({self.mode})")
        try:
            ok = payment.create()
        except SDK_ERRORS as exc:
            _logger.warning(f"create payment failed: {exc!r}")
            raise
        if not ok:
            _logger.warning(f"create payment rejected: {payment.error!r}")
            raise PaymentError(payment.error, subcode=PAYMENT_CREATE_FAILED)
        _logger.info(f"created payment {payment.id}", extra={"payment_id": payment.id})
        return payment

    def _execute(self, payment_id: str, payload: Dict[str, Any]) -> paypalrestsdk.Payment:
        """Execute an approved payment without fetching it first."""
        payment = paypalrestsdk.Payment({"id": payment_id}, api=self._api)
        _logger.debug(f"execute payment {payment_id} ({self.mode})")
        try:
            ok = payment.execute(payload)
        except SDK_ERRORS as exc:
            _logger.warning(f"execute payment {payment_id} failed: {exc!r}")
            raise
        if not ok:
            _logger.warning(f"execute payment {payment_id} rejected: {payment.error!r}")
            raise PaymentError(payment.error, subcode=PAYMENT_EXECUTE_FAILED, details={"payment_id": payment_id})
        _logger.info(f"executed payment {payment_id}", extra={"payment_id": payment_id})
        return payment

    def _find(self, payment_id: str) -> paypalrestsdk.Payment:
        """Fetch a payment; a 400 answer arrives on ``payment.error`` rather than as an exception."""
        _logger.debug(f"find payment {payment_id} ({self.mode})")
        try:
            payment = paypalrestsdk.Payment.find(payment_id, api=self._api)
        except SDK_ERRORS as exc:
            _logger.warning(f"find payment {payment_id} failed: {exc!r}")
            raise
        if payment.error:
            _logger.warning(f"find payment {payment_id} rejected: {payment.error!r}")
            raise PaymentError(payment.error, subcode=PAYMENT_FIND_FAILED, details={"payment_id": payment_id})
        return payment
