"""
Configuration loader for the catalog store
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "store_config.yml"

# environment variable -> StoreConfig field
_ENV_FIELDS = {
    "GITHUB_TOKEN": "token",
    "GITHUB_REPO": "repo",
    "GITHUB_FILEPATH": "filepath",
    "GITHUB_BRANCH": "branch",
    "GITHUB_API_URL": "api_url",
    "GITHUB_TIMEOUT_SECONDS": "timeout_seconds",
    "INTEGRATIONS_MODE": "mode",
}

_MODE_ALIASES = {
    "real": "github",
    "live": "github",
    "github": "github",
    "mock": "memory",
    "test": "memory",
    "memory": "memory",
}


class StoreConfig(BaseModel):
    """Where and how the catalog file is stored"""

    token: Optional[str] = None
    repo: str = "ddy-devlopment/cloud"
    filepath: str = "db-products.json"
    branch: str = "main"
    api_url: str = "https://api.github.com"
    user_agent: str = "ProductDash-API"
    timeout_seconds: float = Field(default=20.0, gt=0, le=300)
    mode: Literal["github", "memory"] = "github"

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v: object) -> object:
        if isinstance(v, str):
            return _MODE_ALIASES.get(v.strip().lower(), v)
        return v

    @field_validator("token", mode="before")
    @classmethod
    def _blank_token_is_missing(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def contents_path(self) -> str:
        return f"/repos/{self.repo}/contents/{self.filepath.lstrip('/')}"

    def __repr__(self) -> str:
        # never print the credential
        return (
            f"StoreConfig(repo={self.repo!r}, filepath={self.filepath!r}, "
            f"branch={self.branch!r}, mode={self.mode!r}, token_set={self.token is not None})"
        )


def load_store_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> StoreConfig:
    """
    Load and validate store configuration

    Values come from an optional YAML file, then environment variables
    override them.

    Args:
        config_path: Path to config file. Defaults to config/store_config.yml
        env: Mapping to read variables from. Defaults to os.environ (after .env is loaded)

    Returns:
        Validated StoreConfig object

    Raises:
        ValidationError: If the merged values don't match the schema
    """
    if env is None:
        load_dotenv()
        env = os.environ

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.debug("No store config file at %s, using environment only", config_path)

    for var, field_name in _ENV_FIELDS.items():
        value = env.get(var)
        if value is not None and value != "":
            data[field_name] = value

    try:
        config = StoreConfig(**data)
        logger.info("Loaded store config: %r", config)
        return config
    except ValidationError as e:
        logger.error(f"Store config validation failed: {e}")
        raise
