"""Configuration management."""

import logging
from pathlib import Path

import yaml

from github_pulls.models import ClientConfig

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None) -> ClientConfig:
    """Load configuration from YAML file or use defaults."""
    if config_path and config_path.exists():
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}
        logger.debug(f"Loaded configuration from {config_path}")
        return ClientConfig(**config_data)
    return ClientConfig()


def save_config(config: ClientConfig, config_path: Path) -> None:
    """Save configuration to YAML file.

    The token is never written; it is read from GITHUB_TOKEN at load time.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", exclude={"token"})

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
