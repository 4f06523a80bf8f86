from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from flutterwave_standard.integrations.contracts.payments import FieldError, GatewayResponseModel

GENERIC_FAILURE_MESSAGE = "Payment initialization failed."
STANDARD_INIT_ERROR = "STANDARD_INIT_ERROR"
MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
INVALID_REQUEST = "INVALID_REQUEST"


class FlutterwaveInitError(Exception):
    """The single failure type surfaced by payment initialization."""

    def __init__(
        self,
        message: str,
        code: str,
        *,
        error_id: Optional[str] = None,
        errors: Optional[Iterable[FieldError]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_id = error_id
        self.errors: Tuple[FieldError, ...] = tuple(errors or ())

    @property
    def field_errors(self) -> Dict[str, str]:
        return {e.field or "": e.message or "" for e in self.errors}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "error_id": self.error_id,
            "errors": [e.model_dump(include={"field", "message"}) for e in self.errors],
        }

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        return f"{self.message} ({details})"

    def __repr__(self) -> str:
        return f"FlutterwaveInitError(message={self.message!r}, code={self.code!r})"


def parse_gateway_response(raw: Any) -> GatewayResponseModel:
    """Validate a decoded response body. Raises pydantic's ValidationError on shape mismatch."""
    return GatewayResponseModel.model_validate(raw)


def interpret(response: GatewayResponseModel) -> str:
    """Return the hosted payment link, or raise FlutterwaveInitError."""
    link = response.data.link if response.data is not None else None
    if response.status == "success" and link:
        return link

    fallback_code = MALFORMED_RESPONSE if response.status == "success" else STANDARD_INIT_ERROR
    raise FlutterwaveInitError(
        message=response.message or GENERIC_FAILURE_MESSAGE,
        code=response.code or response.error_id or fallback_code,
        error_id=response.error_id,
        errors=response.errors,
    )
