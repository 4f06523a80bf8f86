"""Failure normalization for payment initialization."""
from typing import Any, Dict
import logging

from flutterwave_standard.integrations.policy.response_wrappers import FlutterwaveInitError

logger = logging.getLogger(__name__)


def normalize_failure(exc: BaseException) -> FlutterwaveInitError:
    if isinstance(exc, FlutterwaveInitError):
        return exc
    kind = type(exc).__name__
    return FlutterwaveInitError(message=str(exc) or kind, code=kind.upper())


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        failure = normalize_failure(exc)
        logger.error("Payment initialization failed [%s]: %s", failure.code, failure.message, exc_info=exc)
        return {
            "message": "We could not start your payment. Please try again later.",
            "code": failure.code,
            "fallback": True,
            "metadata": {
                "error": failure.message,
                "error_id": failure.error_id,
                "field_errors": failure.field_errors,
                "context": context or {},
            },
        }
