"""
Configuration management for the Front MCP Server.

This module handles the API token, endpoint, default inbox and transport
settings. It is the only place that reads process environment state; the
API client receives explicit values.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_BASE_URL = "https://api2.frontapp.com"


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""

    pass


@dataclass(frozen=True)
class FrontConfig:
    """Main configuration class."""

    api_token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    default_inbox_id: Optional[str] = None
    request_timeout_s: float = 30.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FrontConfig":
        """Create config from dictionary."""
        return cls(
            api_token=data.get("api_token") or None,
            base_url=data.get("base_url") or DEFAULT_BASE_URL,
            default_inbox_id=data.get("default_inbox_id") or None,
            request_timeout_s=float(data.get("request_timeout_s", 30.0)),
        )

    @classmethod
    def from_file(cls, path: Path) -> "FrontConfig":
        """Load config from JSON file."""
        if path.exists():
            with open(path) as f:
                data = json.load(f)
                return cls.from_dict(data)
        return cls()

    @classmethod
    def from_env(cls) -> "FrontConfig":
        """Create config from environment variables."""
        data: Dict[str, Any] = {}

        if env_val := os.getenv("FRONT_API_TOKEN"):
            data["api_token"] = env_val

        if env_val := os.getenv("DEFAULT_INBOX_ID"):
            data["default_inbox_id"] = env_val

        if env_val := os.getenv("FRONT_API_BASE_URL"):
            data["base_url"] = env_val

        if env_val := os.getenv("FRONT_REQUEST_TIMEOUT"):
            data["request_timeout_s"] = float(env_val)

        return cls.from_dict(data)

    def resolve_inbox_id(self, inbox_id: Optional[str] = None) -> str:
        """Return the explicit inbox ID, falling back to the configured default."""
        resolved = inbox_id or self.default_inbox_id
        if not resolved:
            raise ConfigurationError(
                "inboxId parameter or DEFAULT_INBOX_ID environment variable is required"
            )
        return resolved

    def __repr__(self) -> str:
        token_state = "set" if self.api_token else "missing"
        return (
            f"FrontConfig(api_token=<{token_state}>, base_url={self.base_url!r}, "
            f"default_inbox_id={self.default_inbox_id!r}, "
            f"request_timeout_s={self.request_timeout_s})"
        )


def load_config() -> FrontConfig:
    """Load configuration from file or environment."""
    # Check for config file in standard locations
    config_paths = [
        Path("config.json"),
        Path("~/.frontapp-mcp/config.json").expanduser(),
        Path("/etc/frontapp-mcp/config.json"),
    ]

    for path in config_paths:
        if path.exists():
            return FrontConfig.from_file(path)

    # Fall back to environment variables
    return FrontConfig.from_env()


# Global config instance (lazy loaded)
_config: Optional[FrontConfig] = None


def get_config() -> FrontConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
