"""
Request-level errors raised while validating and simulating payments.
All of them end up as HTTP 422 responses; none is fatal to the process.
"""


class PaymentError(Exception):
    status = "invalid request"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"status": self.status, "message": self.message}


class InvalidRequest(PaymentError):
    status = "invalid request"


class ShapeError(InvalidRequest):
    def __init__(self, message="invalid request object format"):
        super().__init__(message)


class PaymentTypeError(InvalidRequest):
    def __init__(self, message="invalid type"):
        super().__init__(message)


class ReferenceFormatError(InvalidRequest):
    def __init__(self, message="invalid reference"):
        super().__init__(message)


class PaymentValueError(InvalidRequest):
    def __init__(self, message="invalid value"):
        super().__init__(message)


class SimulationRejection(PaymentError):
    """Raised by a gateway when a valid request is refused."""

    status = "invalid operation"
