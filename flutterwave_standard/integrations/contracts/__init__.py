"""
Contracts (data models).

This folder defines the request/response shapes for the Standard checkout
integration:
- the initialization request and its wire payload
- the decoded gateway response

Both mock and real HTTP clients should use these contracts.
"""
