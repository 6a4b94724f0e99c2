"""
Validation of incoming payment request bodies.

Each check raises an InvalidRequest subclass on the first problem found.
validate_request_body() keeps the plain string contract used by the API:
an empty string when the body is valid, the failure message otherwise.
"""
import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Dict

from errors import (
    InvalidRequest, PaymentTypeError, PaymentValueError,
    ReferenceFormatError, ShapeError,
)
from payment_types import PaymentType

REQUEST_FIELDS = frozenset(("type", "reference", "value"))
CENTS = Decimal("0.01")


def round_value(value) -> Decimal:
    """Round a JSON number half-up to two decimal places."""
    # Decimal(float) is exact, so ties are decided on the binary value received.
    amount = Decimal(value)
    # Precision must cover every integer digit plus the two decimals
    context = Context(prec=max(28, amount.adjusted() + 3))
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP, context=context)


def format_value(value) -> str:
    return format(round_value(value), "f")


def check_shape(data):
    if not isinstance(data, dict) or set(data) != REQUEST_FIELDS:
        raise ShapeError()


def check_type(data, payment_types: Dict[str, PaymentType]) -> PaymentType:
    payment_type = data.get("type")
    if not isinstance(payment_type, str) or payment_type not in payment_types:
        raise PaymentTypeError()
    return payment_types[payment_type]


def check_reference(data, payment_type: PaymentType):
    reference = data.get("reference")
    if not isinstance(reference, str):
        raise ReferenceFormatError("reference must be a string")
    if not payment_type.matches_reference(reference):
        raise ReferenceFormatError()


def check_value(data) -> Decimal:
    value = data.get("value")
    # bool is an int subclass but true/false are not amounts
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PaymentValueError()
    if isinstance(value, float) and not math.isfinite(value):
        raise PaymentValueError()
    amount = round_value(value)
    if amount <= 0:
        raise PaymentValueError()
    return amount


def validate(data, payment_types: Dict[str, PaymentType]) -> PaymentType:
    """Run every check in order and return the matching PaymentType."""
    check_shape(data)
    payment_type = check_type(data, payment_types)
    check_reference(data, payment_type)
    check_value(data)
    return payment_type


def validate_request_body(data, payment_types: Dict[str, PaymentType]) -> str:
    try:
        validate(data, payment_types)
    except InvalidRequest as e:
        return e.message
    return ""
