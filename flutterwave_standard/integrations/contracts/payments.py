"""
Payment contracts.

Defines the request/response structures for Standard checkout initialization:
- the decoded gateway response (status, message, codes, field errors, link)
- request validation against the configured currency allow-list

These contracts must be used by both:
- clients/mocks/payments.py (fake links for development/testing)
- clients/real_http/payments.py (real gateway calls)
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator

from .interfaces import InitializationRequest


# ---------------------------------------------------------------------------
# Gateway response models
# ---------------------------------------------------------------------------


class FieldError(BaseModel):
    """One rejected request field, as reported by the gateway."""

    model_config = ConfigDict(extra="allow", frozen=True)

    field: Optional[str] = None
    message: Optional[str] = None


class GatewayResponseData(BaseModel):
    model_config = ConfigDict(extra="allow")

    link: Optional[str] = None


class GatewayResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    message: Optional[str] = None
    error_id: Optional[str] = None
    code: Optional[str] = None
    errors: Optional[List[FieldError]] = None
    data: Optional[GatewayResponseData] = None

    @field_validator("code", "error_id", "message", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_initialization_request(
    request: InitializationRequest,
    supported_currencies: Optional[Iterable[str]] = None,
) -> List[str]:
    """
    Return a list of validation errors.
    Empty list means the request is valid.
    """
    errors: List[str] = []

    if not request.credential:
        errors.append("credential is required")
    if isinstance(request.amount, bool) or not isinstance(request.amount, (int, float)):
        errors.append("amount must be a number")
    elif request.amount <= 0:
        errors.append("amount must be greater than zero")
    if not request.transaction_reference:
        errors.append("transaction_reference is required")

    parsed = urlparse(request.redirect_url or "")
    if not (parsed.scheme and parsed.netloc):
        errors.append(f"redirect_url '{request.redirect_url}' must be an absolute URL")

    if request.customer is None or not request.customer.email:
        errors.append("customer.email is required")

    code = request.currency_code
    if code is not None and supported_currencies is not None:
        allowed = {c.upper() for c in supported_currencies}
        if code.upper() not in allowed:
            errors.append(f"currency '{code}' is not supported")

    for index, sub_account in enumerate(request.sub_accounts):
        if not sub_account.id:
            errors.append(f"sub_accounts[{index}].id is required")

    return errors
