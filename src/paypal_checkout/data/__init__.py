# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal adapters over the PayPal REST SDK."""

__all__ = []
