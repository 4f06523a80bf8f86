"""
Real Payments HTTP Client.

Initializes a Standard (hosted checkout) payment and returns the payment link
the payer must be redirected to.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from flutterwave_standard.error_handler import normalize_failure
from flutterwave_standard.integrations.contracts.interfaces import InitializationRequest
from flutterwave_standard.integrations.contracts.payments import validate_initialization_request
from flutterwave_standard.integrations.policy.response_wrappers import (
    INVALID_REQUEST,
    FlutterwaveInitError,
    interpret,
    parse_gateway_response,
)
from flutterwave_standard.utils.cancellation import AbortController
from flutterwave_standard.utils.config_loader import GatewayConfig, load_gateway_config

logger = logging.getLogger(__name__)

_default_client: Optional["StandardPaymentsClient"] = None


class StandardPaymentsClient:
    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or GatewayConfig()
        self.transport = transport

    @property
    def standard_url(self) -> str:
        return self.config.standard_url

    async def initialize(
        self,
        request: InitializationRequest,
        abort_controller: Optional[AbortController] = None,
    ) -> str:
        try:
            return await self._initialize(request, abort_controller)
        except Exception as exc:
            failure = normalize_failure(exc)
            logger.debug(
                "Standard payment %s failed with %s",
                getattr(request, "transaction_reference", None),
                failure.code,
            )
            if failure is exc:
                raise
            raise failure from exc

    async def _initialize(
        self,
        request: InitializationRequest,
        abort_controller: Optional[AbortController],
    ) -> str:
        if self.config.validate_requests:
            errors = validate_initialization_request(request, self.config.supported_currencies)
            if errors:
                raise FlutterwaveInitError(message="; ".join(errors), code=INVALID_REQUEST)

        signal = abort_controller.signal if abort_controller is not None else None
        if signal is not None:
            signal.throw_if_aborted()

        headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {request.credential}",
        }
        payload = request.to_payload()

        logger.debug(
            "Initializing Standard payment tx_ref=%s amount=%s currency=%s",
            request.transaction_reference,
            request.amount,
            request.currency_code,
        )

        async with httpx.AsyncClient(timeout=None, transport=self.transport) as client:
            call = client.post(self.standard_url, json=payload, headers=headers)
            response = await (signal.guard(call) if signal is not None else call)

        return interpret(parse_gateway_response(response.json()))


async def initialize(
    request: InitializationRequest,
    abort_controller: Optional[AbortController] = None,
    *,
    client: Optional[StandardPaymentsClient] = None,
) -> str:
    """
    Initialize a Standard payment with the given (or the shared default) client.

    The default client loads its config once, on first use. Long-lived callers
    that need a different config should keep their own StandardPaymentsClient.
    """
    if client is None:
        try:
            client = get_default_client()
        except Exception as exc:
            raise normalize_failure(exc) from exc
    return await client.initialize(request, abort_controller)


def get_default_client() -> StandardPaymentsClient:
    global _default_client
    if _default_client is None:
        _default_client = StandardPaymentsClient(config=load_gateway_config())
    return _default_client
