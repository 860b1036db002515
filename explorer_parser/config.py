"""
Scraper configuration.

Resolution order (later wins):
  1. defaults below
  2. JSON config file, if given
  3. environment variables (a .env file in the working directory is loaded first)
  4. command-line flags, applied by run_scraper.py via apply_overrides()
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError
from .logger import get_module_logger
from .urls import Cluster

logger = get_module_logger("config")

# environment variable → config field
ENV_VARS = {
    "EXPLORER_CLUSTER": "cluster",
    "EXPLORER_WAIT_TIME": "wait_time",
    "EXPLORER_TX_LIMIT": "tx_limit",
    "EXPLORER_OUTPUT": "output_file_path",
}


class ScraperConfig(BaseModel):
    cluster: Cluster = Cluster.DEVNET
    wait_time: float = Field(default=20.0, ge=0, description="Seconds to let the page render")
    tx_limit: int = Field(default=10, ge=0, description="Recent transactions to read from an account page")
    output_file_path: Optional[str] = None   # None → stdout


def load_config(config_file: Optional[Union[str, Path]] = None) -> ScraperConfig:
    """Build the configuration from file and environment."""
    load_dotenv()
    values = {}

    if config_file:
        path = Path(config_file)
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}", {"path": str(path)}) from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object", {"path": str(path)})
        values.update(data)
        logger.debug(f"Loaded config file {path}")

    for env_var, field in ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            values[field] = value

    try:
        return ScraperConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", {"errors": [err["msg"] for err in e.errors()]}) from e


def apply_overrides(config: ScraperConfig, **overrides) -> ScraperConfig:
    """Return a validated copy of `config` with the non-None overrides applied."""
    values = config.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return ScraperConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", {"errors": [err["msg"] for err in e.errors()]}) from e
