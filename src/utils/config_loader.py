"""
Configuration loader for the product summary panel
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "product_summary.yml"


class FormattingConfig(BaseModel):
    """ATM fee label formatting"""

    # Fees at or below this magnitude are shown as percentages, above it as EUR amounts.
    percentage_threshold: float = Field(default=100.0, gt=0)


class LoaderConfig(BaseModel):
    """Product summary loading behaviour"""

    discard_stale_responses: bool = False


class ServiceConfig(BaseModel):
    """One remote integration endpoint"""

    base_url_env: str
    api_key_env: str
    timeout_seconds: float = Field(default=15.0, gt=0, le=120)

    def base_url(self) -> str:
        return os.getenv(self.base_url_env, "")

    def api_key(self) -> str:
        return os.getenv(self.api_key_env, "")


class IntegrationsConfig(BaseModel):
    """Remote integration settings"""

    use_mocks: bool = True
    product_info: ServiceConfig = Field(
        default_factory=lambda: ServiceConfig(base_url_env="PRODUCT_INFO_API_URL", api_key_env="PRODUCT_INFO_API_KEY")
    )
    case_records: ServiceConfig = Field(
        default_factory=lambda: ServiceConfig(base_url_env="CASE_RECORDS_API_URL", api_key_env="CASE_RECORDS_API_KEY")
    )


class ProductSummaryConfig(BaseModel):
    """Complete product summary configuration"""

    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)


def load_product_summary_config(config_path: Optional[Path] = None) -> ProductSummaryConfig:
    """
    Load and validate product summary configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/product_summary.yml

    Returns:
        Validated ProductSummaryConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = ProductSummaryConfig(**config_data)
        logger.info(f"Successfully loaded config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
