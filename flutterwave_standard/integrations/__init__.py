"""
Integrations layer.
This package contains the code used to talk to the payment gateway:
- contracts: request/response shapes shared by every client
- policy: interpretation of gateway responses
- clients: the real HTTP client and a network-free mock

Key rule:
- Callers MUST NOT call the gateway directly; they go through a client's initialize().
"""
