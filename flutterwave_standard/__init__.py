"""
Flutterwave Standard checkout initialization.

    link = await initialize(InitializationRequest(...))

`initialize` resolves to the hosted payment link or raises FlutterwaveInitError.
"""

from .error_handler import ErrorHandler, normalize_failure
from .integrations.clients.real_http.payments import StandardPaymentsClient, initialize
from .integrations.contracts.interfaces import (
    Currency,
    Customer,
    Customizations,
    InitializationRequest,
    SubAccount,
)
from .integrations.contracts.payments import FieldError, GatewayResponseModel
from .integrations.policy.response_wrappers import FlutterwaveInitError, interpret
from .utils.cancellation import AbortController, AbortError, AbortSignal
from .utils.config_loader import GatewayConfig, load_gateway_config

__all__ = [
    "initialize", "StandardPaymentsClient",
    "InitializationRequest", "Customer", "Customizations", "SubAccount", "Currency",
    "GatewayResponseModel", "FieldError", "FlutterwaveInitError", "interpret",
    "normalize_failure", "ErrorHandler",
    "AbortController", "AbortSignal", "AbortError",
    "GatewayConfig", "load_gateway_config",
]
