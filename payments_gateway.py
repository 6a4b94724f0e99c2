"""
Gateway adapter for payment operations.
Only a sandbox is provided: it decides acceptance from the payment type table
instead of calling a real provider. Designed so another provider can be plugged in.
"""
import logging
import os
from typing import Dict

from errors import SimulationRejection
from payment_types import PaymentType, get_payment_types
from validators import round_value

logger = logging.getLogger(__name__)


class BaseGateway:
    def simulate(self, data) -> None:
        raise NotImplementedError()


class SandboxGateway(BaseGateway):
    """Canned gateway that refuses some reference ranges and values over each type's ceiling.
    Expects a request already accepted by validators.validate().
    """

    def __init__(self, payment_types: Dict[str, PaymentType] = None):
        self.payment_types = payment_types or get_payment_types()

    def simulate(self, data) -> None:
        payment_type = self.payment_types[data["type"]]

        if not payment_type.accepts_reference(data["reference"]):
            raise SimulationRejection("payment reference not accepted")

        if not payment_type.within_limit(round_value(data["value"])):
            raise SimulationRejection("payment limit exceeded")


def simulate_operation(gateway: BaseGateway, data) -> str:
    """Return the rejection message for a validated request, or '' if accepted."""
    try:
        gateway.simulate(data)
    except SimulationRejection as e:
        return e.message
    return ""


# Simple factory to select gateway by env var or default to sandbox
def get_gateway(name: str = None, payment_types: Dict[str, PaymentType] = None) -> BaseGateway:
    provider = (name or os.getenv('GATEWAY_PROVIDER', 'sandbox')).lower()
    if provider != 'sandbox':
        logger.warning(f"Gateway provider '{provider}' is not available, using sandbox.")
    return SandboxGateway(payment_types)
