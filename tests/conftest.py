# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for PayPal checkout tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest
from unittest.mock import MagicMock

from paypal_checkout.client import PayPal
from paypal_checkout.core.config import PayPalConfig


@pytest.fixture
def test_config():
    """Test configuration with recognisable redirect URLs."""
    return PayPalConfig(
        mode="sandbox",
        return_url="https://shop.example/return",
        cancel_url="https://shop.example/cancel",
    )


@pytest.fixture
def client(test_config):
    """PayPal client whose SDK adapter is a MagicMock."""
    pay = PayPal("test-client-id", "test-secret", test_config)
    pay._payments = MagicMock()
    return pay


@pytest.fixture
def sample_payment_id():
    """Sample PayPal payment id."""
    return "PAY-1B56960729604235TKQQIYVY"


@pytest.fixture
def sample_payer_id():
    """Sample PayPal payer id."""
    return "CR87QHB7JTRSC"
