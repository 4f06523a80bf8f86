"""
Configuration loader for the Standard payments client
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from flutterwave_standard.integrations.contracts.interfaces import Currency

logger = logging.getLogger(__name__)

STANDARD_URL = "https://api.flutterwave.com/v3/payments"
STANDARD_URL_ENV = "FLUTTERWAVE_STANDARD_URL"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "gateway_config.yml"


class GatewayConfig(BaseModel):
    """Gateway endpoint and request checks applied before dispatch"""

    standard_url: str = STANDARD_URL
    supported_currencies: List[str] = Field(default_factory=lambda: [c.value for c in Currency])
    validate_requests: bool = True

    @field_validator("supported_currencies")
    @classmethod
    def _upper_codes(cls, value: List[str]) -> List[str]:
        return [str(code).strip().upper() for code in value]


def load_gateway_config(config_path: Optional[Path] = None) -> GatewayConfig:
    """
    Load and validate gateway configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/gateway_config.yml

    Returns:
        Validated GatewayConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    config_data = {}
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.info("No gateway config at %s, using defaults", path)

    env_url = os.getenv(STANDARD_URL_ENV, "").strip()
    if env_url:
        config_data["standard_url"] = env_url

    try:
        config = GatewayConfig(**config_data)
        logger.info("Loaded gateway config (standard_url=%s)", config.standard_url)
        return config
    except ValidationError as e:
        logger.error(f"Gateway config validation failed: {e}")
        raise
