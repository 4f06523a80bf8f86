"""
Utility modules for the Standard payments client
"""
from .cancellation import AbortController, AbortError, AbortSignal
from .config_loader import GatewayConfig, load_gateway_config

__all__ = [
    'AbortController',
    'AbortError',
    'AbortSignal',
    'GatewayConfig',
    'load_gateway_config',
]
