# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured errors raised (or handed to callbacks) by the PayPal checkout wrapper.

Errors produced by ``paypalrestsdk`` itself, and by ``requests`` underneath it,
are not wrapped; they reach the caller unchanged.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class PayPalError(Exception):
    """Base structured error for the PayPal checkout wrapper."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.details = details or {}
        self.source = source or "client"
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "details": self.details,
            "source": self.source,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(PayPalError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class PaymentError(PayPalError):
    """
    A create or execute call that PayPal answered with an error body.

    :param error: The SDK's ``resource.error`` value, kept unchanged on :attr:`error`.
    :type error: dict or None
    :param subcode: Which operation failed, see :mod:`paypal_checkout.core._error_codes`.
    :type subcode: str or None
    """

    def __init__(
        self,
        error: Optional[Dict[str, Any]],
        *,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.error = error
        body = error if isinstance(error, dict) else {}
        message = body.get("message") or body.get("name") or "PayPal rejected the payment request"
        d = details or {}
        if body.get("name") is not None:
            d["name"] = body["name"]
        if body.get("debug_id") is not None:
            d["debug_id"] = body["debug_id"]
        super().__init__(message, code="payment_error", subcode=subcode, details=d, source="server")


class ApprovalUrlNotFoundError(PayPalError):
    def __init__(self, payment_id: str) -> None:
        super().__init__(
            "approval_url not found",
            code="approval_url_not_found",
            details={"payment_id": payment_id},
            source="server",
        )


__all__ = ["PayPalError", "ValidationError", "PaymentError", "ApprovalUrlNotFoundError"]
