# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Create a sandbox payment and print the URL the buyer must visit to approve it.

Reads PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET (and optionally PAYPAL_MODE,
PAYPAL_RETURN_URL, PAYPAL_CANCEL_URL) from the environment.

After approving in the browser PayPal redirects to the return URL with
``paymentId`` and ``PayerID`` query parameters; pass them as arguments to
execute the payment::

    python examples/quickstart.py                      # create + approval URL
    python examples/quickstart.py PAY-XXXX PAYERID     # execute
"""

import logging
import sys

from paypal_checkout import PayPal


def on_approval_url(error, approval_url):
    if error:
        print(f"Could not get approval URL: {error}", file=sys.stderr)
        return
    print(approval_url)


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    try:
        pay = PayPal.from_env()
    except ValueError as ex:
        print(f"{ex} Set PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET.", file=sys.stderr)
        return 1

    if len(sys.argv) == 3:
        def on_executed(error, payment):
            if error:
                print(f"Execute failed: {error}", file=sys.stderr)
                return 1
            print(f"Payment {payment.id} is {payment.state}")
            return 0

        return pay.execute_payment(sys.argv[1], sys.argv[2], on_executed)

    def on_created(error, payment):
        if error:
            print(f"Create failed: {error}", file=sys.stderr)
            return 1
        pay.get_approval_url(payment.id, on_approval_url)
        return 0

    return pay.create_payment(
        {"amount": "10.00", "currency": "USD", "description": "Payment for item"},
        on_created,
    )


if __name__ == "__main__":
    sys.exit(main())
