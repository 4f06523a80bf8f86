"""
Real HTTP integration clients.

These clients talk to the payment gateway over HTTPS.

Important:
- Must implement the same interface as the mock clients
- Must use the shapes defined in flutterwave_standard/integrations/contracts/*
"""
