"""
Payment operations exposed by the API (payments/refunds or credit/debit).
Each call validates the body, asks the gateway to simulate it and builds the
response body with its HTTP status. Nothing is stored between calls.
"""
from typing import Dict, List, Tuple

from errors import PaymentError
from payment_types import PaymentType
from payments_gateway import BaseGateway
from validators import format_value, validate

# operation name (and URL segment) -> noun used in the success message
OPERATIONS = {
    'payments': 'payment',
    'refunds': 'refund',
    'credit': 'credit',
    'debit': 'debit',
}


def parse_operations(value: str) -> List[str]:
    names = [name.strip().lower() for name in value.split(',') if name.strip()]
    if not names:
        raise ValueError('at least one payment operation must be enabled')
    unknown = [name for name in names if name not in OPERATIONS]
    if unknown:
        raise ValueError(f"unknown payment operations: {', '.join(unknown)}")
    return list(dict.fromkeys(names))


def register_operation(operation: str, data, payment_types: Dict[str, PaymentType],
                       gateway: BaseGateway) -> Dict:
    """Validate and simulate one operation. Raises PaymentError when refused."""
    validate(data, payment_types)
    gateway.simulate(data)
    return {
        'status': 'valid',
        'message': f'{OPERATIONS[operation]} registered',
        'value': format_value(data['value']),
    }


def operation_response(operation: str, data, payment_types: Dict[str, PaymentType],
                       gateway: BaseGateway) -> Tuple[Dict, int]:
    try:
        return register_operation(operation, data, payment_types, gateway), 201
    except PaymentError as e:
        return e.to_dict(), 422
