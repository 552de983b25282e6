# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common utilities and constants for the PayPal checkout wrapper.

This package contains shared constants used across the SDK.
"""
