"""
Mock integration clients.

These clients return fake (but realistic) payment links without calling the gateway.
They are used when:
- gateway credentials are not available
- we want to test callers end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
"""
