from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Currency(str, Enum):
    AUD = "AUD"
    BIF = "BIF"
    CDF = "CDF"
    CAD = "CAD"
    CVE = "CVE"
    EUR = "EUR"
    GBP = "GBP"
    GHS = "GHS"
    GMD = "GMD"
    GNF = "GNF"
    KES = "KES"
    LRD = "LRD"
    MWK = "MWK"
    MZN = "MZN"
    NGN = "NGN"
    RWF = "RWF"
    SLL = "SLL"
    STD = "STD"
    TZS = "TZS"
    UGX = "UGX"
    USD = "USD"
    XAF = "XAF"
    XOF = "XOF"
    ZAR = "ZAR"
    ZMK = "ZMK"
    ZMW = "ZMW"
    ZWD = "ZWD"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class Customer:
    email: str
    phone_number: Optional[str] = None
    name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return _drop_none({"email": self.email, "phonenumber": self.phone_number, "name": self.name})


@dataclass(frozen=True)
class Customizations:
    title: Optional[str] = None
    logo: Optional[str] = None
    description: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return _drop_none({"title": self.title, "logo": self.logo, "description": self.description})


@dataclass(frozen=True)
class SubAccount:
    id: str
    transaction_split_ratio: Optional[float] = None
    transaction_charge_type: Optional[str] = None
    transaction_charge: Optional[float] = None

    def to_payload(self) -> Dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "transaction_split_ratio": self.transaction_split_ratio,
            "transaction_charge_type": self.transaction_charge_type,
            "transaction_charge": self.transaction_charge,
        })


@dataclass(frozen=True)
class InitializationRequest:
    """
    One Standard checkout initialization.

    `credential` is the merchant secret key. It only ever travels in the
    Authorization header, so it is kept out of repr() and to_payload().
    """
    credential: str = field(repr=False)
    amount: float
    redirect_url: str
    transaction_reference: str
    customer: Customer
    currency: Optional[Union[Currency, str]] = None
    customizations: Optional[Customizations] = None
    payment_options: Optional[str] = None
    payment_plan: Optional[int] = None
    integrity_hash: Optional[str] = None
    sub_accounts: Tuple[SubAccount, ...] = ()
    metadata: Optional[Mapping[str, Any]] = None

    @property
    def currency_code(self) -> Optional[str]:
        if self.currency is None:
            return None
        if isinstance(self.currency, Currency):
            return self.currency.value
        return str(self.currency)

    def to_payload(self) -> Dict[str, Any]:
        """Request body in the gateway's wire vocabulary, without the credential."""
        payload: Dict[str, Any] = {
            "tx_ref": self.transaction_reference,
            "amount": self.amount,
            "currency": self.currency_code,
            "redirect_url": self.redirect_url,
            "customer": self.customer.to_payload(),
            "customizations": self.customizations.to_payload() if self.customizations else None,
            "payment_options": self.payment_options,
            "payment_plan": self.payment_plan,
            "integrity_hash": self.integrity_hash,
            "subaccounts": [s.to_payload() for s in self.sub_accounts] if self.sub_accounts else None,
            "meta": dict(self.metadata) if self.metadata is not None else None,
        }
        return _drop_none(payload)
