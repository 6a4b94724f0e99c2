"""
Payment type tables.

Each payment code maps to a PaymentType record holding the reference format,
the prefixes the sandbox gateway accepts or refuses and the maximum value of
a single operation. A variant is a named table of those records; the active
one is chosen with PAYMENTS_VARIANT.
"""
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Tuple

# Local part follows the usual RFC 5322 "atext" set, domain is dot separated labels.
EMAIL_PATTERN = r"[a-zA-Z0-9.!#$%&’*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*"


@dataclass(frozen=True)
class PaymentType:
    code: str
    reference_pattern: re.Pattern
    max_value: Decimal
    accepted_prefixes: Tuple[str, ...] = ()
    rejected_prefixes: Tuple[str, ...] = ()

    def matches_reference(self, reference: str) -> bool:
        return self.reference_pattern.fullmatch(reference) is not None

    def accepts_reference(self, reference: str) -> bool:
        if self.accepted_prefixes and not reference.startswith(self.accepted_prefixes):
            return False
        return not (self.rejected_prefixes and reference.startswith(self.rejected_prefixes))

    def within_limit(self, value: Decimal) -> bool:
        return value <= self.max_value


def _payment_type(code, pattern, max_value, accepted=(), rejected=()):
    return PaymentType(
        code=code,
        reference_pattern=re.compile(pattern),
        max_value=Decimal(max_value),
        accepted_prefixes=tuple(accepted),
        rejected_prefixes=tuple(rejected),
    )


def _table(*types):
    return {t.code: t for t in types}


VARIANTS: Dict[str, Dict[str, PaymentType]] = {
    # Five payment methods, loose reference formats, gateway refuses ranges.
    "extended": _table(
        _payment_type("MBWAY", r"[1-9][0-9]{8}", "50", accepted=["9"]),
        _payment_type("PAYPAL", EMAIL_PATTERN, "100", rejected=["xx"]),
        _payment_type("VISA", r"[1-9][0-9]{15}", "200", accepted=["4"]),
        _payment_type("MB", r"[1-9][0-9]{4}-[1-9][0-9]{8}", "500", rejected=["9"]),
        _payment_type("IBAN", r"[A-Z]{2}[0-9]{23}", "1000", rejected=["XX"]),
    ),
    # Three payment methods, prefixes enforced by the reference format itself.
    "legacy": _table(
        _payment_type("MBWAY", r"9[0-9]{8}", "10", accepted=["9"]),
        _payment_type("PAYPAL", EMAIL_PATTERN, "50", rejected=["xx"]),
        _payment_type("VISA", r"4[0-9]{15}", "200", accepted=["4"]),
    ),
}

DEFAULT_VARIANT = "extended"


def get_payment_types(variant: str = None) -> Dict[str, PaymentType]:
    name = (variant or DEFAULT_VARIANT).lower()
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f"unknown payments variant: {variant!r}") from None
