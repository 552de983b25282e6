# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Validation subcodes
VALIDATION_AMOUNT_MISSING = "validation_amount_missing"
VALIDATION_PAYMENT_ID_MISSING = "validation_payment_id_missing"
VALIDATION_PAYER_ID_MISSING = "validation_payer_id_missing"

# Payment subcodes
PAYMENT_CREATE_FAILED = "payment_create_failed"
PAYMENT_EXECUTE_FAILED = "payment_execute_failed"
PAYMENT_FIND_FAILED = "payment_find_failed"

ALL_PAYMENT_SUBCODES = {
    PAYMENT_CREATE_FAILED,
    PAYMENT_EXECUTE_FAILED,
    PAYMENT_FIND_FAILED,
}
