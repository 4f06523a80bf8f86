"""
Mock Payments Client.

Purpose:
- Provides a fake Standard checkout integration used for development/testing
- Does NOT make any network calls
- Returns deterministic payment links built from the transaction reference

Behavior guidelines:
- initialize(...) validates the request the same way the real client does
- an aborted controller fails the call with ABORTERROR
- a configured `fail_with` error is rebuilt and raised on each call instead of returning a link
- sent_payloads records every dispatched body until reset() is called

Swap:
Replace this mock client with StandardPaymentsClient in
clients/real_http/payments.py when gateway credentials are available.
"""

import asyncio
import logging
from typing import List, Optional

from flutterwave_standard.error_handler import normalize_failure
from flutterwave_standard.integrations.contracts.interfaces import InitializationRequest
from flutterwave_standard.integrations.contracts.payments import FieldError, validate_initialization_request
from flutterwave_standard.integrations.policy.response_wrappers import INVALID_REQUEST, FlutterwaveInitError
from flutterwave_standard.utils.cancellation import AbortController
from flutterwave_standard.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)

MOCK_LINK_BASE = "https://checkout.flutterwave.test/v3/hosted/pay"


class MockStandardPaymentsClient:
    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        fail_with: Optional[FlutterwaveInitError] = None,
        link_base: str = MOCK_LINK_BASE,
        latency_seconds: float = 0.0,
    ) -> None:
        self.config = config or GatewayConfig()
        self.fail_with = fail_with.to_dict() if fail_with is not None else None
        self.link_base = link_base.rstrip("/")
        self.latency_seconds = latency_seconds
        self.sent_payloads: List[dict] = []

    def reset(self) -> None:
        self.sent_payloads.clear()

    async def initialize(
        self,
        request: InitializationRequest,
        abort_controller: Optional[AbortController] = None,
    ) -> str:
        try:
            return await self._initialize(request, abort_controller)
        except Exception as exc:
            failure = normalize_failure(exc)
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

        self.sent_payloads.append(request.to_payload())
        logger.info("[MOCK] Standard payment initialized: %s", request.transaction_reference)

        call = asyncio.sleep(self.latency_seconds)
        if abort_controller is not None:
            await abort_controller.signal.guard(call)
        else:
            await call

        if self.fail_with is not None:
            raise FlutterwaveInitError(
                message=self.fail_with["message"],
                code=self.fail_with["code"],
                error_id=self.fail_with["error_id"],
                errors=[FieldError(**e) for e in self.fail_with["errors"]],
            )
        return f"{self.link_base}/{request.transaction_reference}"
