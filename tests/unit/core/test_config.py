# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import dataclasses
from unittest.mock import patch

import pytest

from paypal_checkout.core.config import PayPalConfig


def test_defaults():
    config = PayPalConfig()
    assert config.mode == "sandbox"
    assert config.return_url == "https://return.url"
    assert config.cancel_url == "https://cancel.url"
    assert config.currency == "USD"
    assert config.description == "This is the payment description."
    assert config.proxies is None


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        PayPalConfig().mode = "live"


def test_from_env_reads_variables():
    env = {
        "PAYPAL_MODE": "live",
        "PAYPAL_RETURN_URL": "https://shop.example/ok",
        "PAYPAL_CANCEL_URL": "https://shop.example/cancel",
        "PAYPAL_CURRENCY": "EUR",
    }
    with patch.dict("os.environ", env, clear=True):
        config = PayPalConfig.from_env()
    assert config == PayPalConfig(
        mode="live",
        return_url="https://shop.example/ok",
        cancel_url="https://shop.example/cancel",
        currency="EUR",
    )


def test_from_env_empty_values_fall_back():
    with patch.dict("os.environ", {"PAYPAL_MODE": "", "PAYPAL_CURRENCY": ""}, clear=True):
        assert PayPalConfig.from_env() == PayPalConfig()
