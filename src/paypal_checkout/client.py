# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from paypalrestsdk import Payment

from .common.constants import ENV_CLIENT_ID, ENV_CLIENT_SECRET, VALID_MODES
from .core._error_codes import VALIDATION_PAYER_ID_MISSING, VALIDATION_PAYMENT_ID_MISSING
from .core.config import PayPalConfig
from .core.errors import ApprovalUrlNotFoundError, PayPalError, ValidationError
from .data._payments import SDK_ERRORS, _PaymentsClient
from .models.payment_request import PaymentRequest, build_execute_payload

_logger = logging.getLogger(__name__)

T = TypeVar("T")

#: ``callback(error, result)``; exactly one of the two arguments is ``None``.
Callback = Callable[[Optional[BaseException], Any], Any]

# Errors delivered to a callback instead of being raised
_FORWARDED_ERRORS = (PayPalError,) + SDK_ERRORS


class PayPal:
    """
    Client for the PayPal REST Payments API.

    Wraps ``paypalrestsdk`` and exposes the three calls of a PayPal-wallet
    checkout: create a payment, get the URL the buyer must visit to approve
    it, and execute it once approved.

    Every operation can be used in two styles:

    **Return / raise**:
        Without a callback the operation returns its result or raises.

    **Callback**:
        With ``callback(error, result)`` the operation reports the outcome
        through the callback and returns whatever the callback returns.
        Validation errors, :class:`~paypal_checkout.core.errors.PaymentError`
        and any exception raised by ``paypalrestsdk`` or ``requests`` arrive as
        ``error``; exceptions raised by the callback itself propagate.

    :param client_id: PayPal REST app client id.
    :type client_id: :class:`str`
    :param secret: PayPal REST app secret.
    :type secret: :class:`str`
    :param config: Optional mode, redirect URLs and defaults.
        If not provided, defaults are loaded from :meth:`~paypal_checkout.core.config.PayPalConfig.from_env`.
    :type config: ~paypal_checkout.core.config.PayPalConfig or None

    :raises ValueError: If ``client_id`` or ``secret`` is empty, or the configured mode is not
        ``"sandbox"`` or ``"live"``.

    .. note::
        The SDK ``Api`` object is created lazily on first use, so constructing
        the client makes no network calls.

    Example:
        Callback style::

            from paypal_checkout import PayPal, PayPalConfig

            pay = PayPal("client-id", "secret", PayPalConfig(return_url="https://shop.example/ok"))

            def on_created(error, payment):
                if error:
                    print(error)
                    return
                pay.get_approval_url(payment.id, lambda err, url: print(err or url))

            pay.create_payment({"amount": "10.00", "currency": "USD"}, on_created)

        Return / raise style::

            payment = pay.create_payment({"amount": "10.00"})
            redirect_to = pay.get_approval_url(payment.id)
            # ... buyer approves, PayPal redirects back with paymentId and PayerID
            pay.execute_payment(payment_id, payer_id)
    """

    def __init__(
        self,
        client_id: str,
        secret: str,
        config: Optional[PayPalConfig] = None,
    ) -> None:
        self._config = config or PayPalConfig.from_env()
        self._client_id = client_id
        self._secret = secret
        self._check_settings()
        self._payments: Optional[_PaymentsClient] = None

    @classmethod
    def from_env(cls, config: Optional[PayPalConfig] = None) -> "PayPal":
        """
        Create a client from ``PAYPAL_CLIENT_ID`` and ``PAYPAL_CLIENT_SECRET``.

        :param config: Optional configuration; defaults to :meth:`PayPalConfig.from_env`.
        :type config: ~paypal_checkout.core.config.PayPalConfig or None
        :rtype: PayPal
        :raises ValueError: If either variable is unset or empty.
        """
        return cls(
            os.environ.get(ENV_CLIENT_ID, ""),
            os.environ.get(ENV_CLIENT_SECRET, ""),
            config,
        )

    @property
    def config(self) -> PayPalConfig:
        return self._config

    @property
    def mode(self) -> str:
        return self._config.mode

    def _check_settings(self) -> None:
        if not self._client_id:
            raise ValueError("client_id is required.")
        if not self._secret:
            raise ValueError("secret is required.")
        if self._config.mode not in VALID_MODES:
            raise ValueError(f"mode must be one of {VALID_MODES}, got {self._config.mode!r}.")

    def _get_payments(self) -> _PaymentsClient:
        """
        Get or create the internal SDK adapter.

        :rtype: ~paypal_checkout.data._payments._PaymentsClient
        """
        if self._payments is None:
            self._payments = _PaymentsClient(
                self._client_id,
                self._secret,
                self._config.mode,
                proxies=self._config.proxies,
            )
        return self._payments

    def configure(self, options: Mapping[str, str]) -> None:
        """
        Point the client at other credentials or another mode.

        Keys mirror ``paypalrestsdk.configure``; omitted keys keep their current value.

        :param options: Mapping with any of ``mode``, ``client_id``, ``client_secret``.
        :type options: ~typing.Mapping
        :raises ValueError: If the resulting settings are invalid. The client keeps
            its previous settings in that case.

        Example::

            pay.configure({"mode": "live", "client_id": "live-id", "client_secret": "live-secret"})
        """
        previous = (self._config, self._client_id, self._secret)
        if "mode" in options:
            self._config = dataclasses.replace(self._config, mode=options["mode"])
        self._client_id = options.get("client_id", self._client_id)
        self._secret = options.get("client_secret", self._secret)
        try:
            self._check_settings()
        except ValueError:
            self._config, self._client_id, self._secret = previous
            raise
        self._payments = None
        _logger.debug(f"reconfigured PayPal client for {self._config.mode}")

    def _complete(self, operation: Callable[[], T], callback: Optional[Callback]) -> Any:
        """Run ``operation`` and deliver its outcome to ``callback`` when one is given."""
        if callback is None:
            return operation()
        try:
            result = operation()
        except _FORWARDED_ERRORS as exc:
            return callback(exc, None)
        return callback(None, result)

    # ---------------- Payments ----------------
    def create_payment(
        self,
        options: Union[PaymentRequest, Mapping[str, Any]],
        callback: Optional[Callback] = None,
    ) -> Any:
        """
        Create a PayPal-wallet sale payment.

        The payment uses the configured redirect URLs. Missing currency and
        description fall back to the configuration, and a single item priced at
        ``amount`` is generated when no items are given.

        :param options: A :class:`~paypal_checkout.models.payment_request.PaymentRequest` or a mapping
            with ``amount`` and optional ``currency``, ``description``, ``items``.
        :type options: PaymentRequest or ~typing.Mapping
        :param callback: Optional ``callback(error, payment)``.
        :type callback: callable or None
        :return: The created ``paypalrestsdk.Payment``, or the callback's return value.
        :raises ~paypal_checkout.core.errors.ValidationError: If ``amount`` is missing (no callback).
        :raises ~paypal_checkout.core.errors.PaymentError: If PayPal rejects the request (no callback).
        """

        def run() -> Payment:
            request = options if isinstance(options, PaymentRequest) else PaymentRequest.from_options(options)
            request.validate()
            payload = request.to_payload(
                return_url=self._config.return_url,
                cancel_url=self._config.cancel_url,
                default_currency=self._config.currency,
                default_description=self._config.description,
            )
            return self._get_payments()._create(payload)

        return self._complete(run, callback)

    def execute_payment(
        self,
        payment_id: str,
        payer_id: str,
        callback: Optional[Callback] = None,
        currency: Optional[str] = None,
    ) -> Any:
        """
        Execute a payment the buyer has approved.

        :param payment_id: Id of the payment returned by :meth:`create_payment`
            (``paymentId`` query parameter of the return URL).
        :type payment_id: :class:`str`
        :param payer_id: Buyer id (``PayerID`` query parameter of the return URL).
        :type payer_id: :class:`str`
        :param callback: Optional ``callback(error, payment)``.
        :type callback: callable or None
        :param currency: Transaction currency; defaults to the configured currency.
        :type currency: :class:`str` or None
        :return: The executed ``paypalrestsdk.Payment``, or the callback's return value.
        :raises ~paypal_checkout.core.errors.ValidationError: If ``payment_id`` or ``payer_id``
            is missing (no callback). ``payment_id`` is checked first.
        :raises ~paypal_checkout.core.errors.PaymentError: If PayPal rejects the request (no callback).
        """

        def run() -> Payment:
            if not payment_id:
                raise ValidationError("paymentId is required", subcode=VALIDATION_PAYMENT_ID_MISSING)
            if not payer_id:
                raise ValidationError("payerId is required", subcode=VALIDATION_PAYER_ID_MISSING)
            payload = build_execute_payload(payer_id, currency or self._config.currency)
            return self._get_payments()._execute(payment_id, payload)

        return self._complete(run, callback)

    def get_approval_url(self, payment_id: str, callback: Optional[Callback] = None) -> Any:
        """
        Fetch a payment and return the URL the buyer must visit to approve it.

        The first link PayPal returns for the payment is used.

        :param payment_id: Id of the payment returned by :meth:`create_payment`.
        :type payment_id: :class:`str`
        :param callback: Optional ``callback(error, url)``.
        :type callback: callable or None
        :return: The approval URL, or the callback's return value.
        :rtype: :class:`str`
        :raises ~paypal_checkout.core.errors.ValidationError: If ``payment_id`` is missing (no callback).
        :raises ~paypal_checkout.core.errors.ApprovalUrlNotFoundError: If the payment has no links (no callback).
        """

        def run() -> str:
            if not payment_id:
                raise ValidationError("paymentId is required", subcode=VALIDATION_PAYMENT_ID_MISSING)
            payment = self._get_payments()._find(payment_id)
            links = payment.links or []
            if links:
                return _link_href(links[0])
            raise ApprovalUrlNotFoundError(payment_id)

        return self._complete(run, callback)


def _link_href(link: Any) -> str:
    # SDK resources expose attributes, raw JSON links are dicts
    if isinstance(link, Mapping):
        return link["href"]
    return link.href
