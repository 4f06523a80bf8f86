"""Pytest fixtures for Standard payment initialization tests."""

import json

import httpx
import pytest

from flutterwave_standard.integrations.contracts.interfaces import Customer, InitializationRequest
from flutterwave_standard.integrations.clients.real_http.payments import StandardPaymentsClient
from flutterwave_standard.utils.config_loader import GatewayConfig

TEST_URL = "https://gateway.test/v3/payments"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replies with a fixed JSON body and keeps every request."""

    def __init__(self, body, status_code=200):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if isinstance(body, (bytes, str)):
                return httpx.Response(status_code, content=body)
            return httpx.Response(status_code, json=body)

        super().__init__(handler)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_transport():
    return RecordingTransport


@pytest.fixture
def payment_request():
    return InitializationRequest(
        credential="sk_test_1",
        amount=1000,
        currency="NGN",
        redirect_url="https://x.test/cb",
        transaction_reference="tx-1",
        customer=Customer(email="a@b.com"),
    )


@pytest.fixture
def gateway_config():
    return GatewayConfig(standard_url=TEST_URL)


@pytest.fixture
def make_client(gateway_config):
    def _make(transport):
        return StandardPaymentsClient(config=gateway_config, transport=transport)

    return _make
