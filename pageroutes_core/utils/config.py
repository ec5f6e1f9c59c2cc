"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Route tables can be declared in a config file:

    log_level: DEBUG
    routes:
      - name: about
      - name: user
        pattern: /user/:id
        page: profile
      - pattern: /blog/:slug
        page: /blog/[slug]
        data:
          section: blog
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml

from pageroutes_core.routing.table import RouteTable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Config")

PACKAGE_LOGGER = "pageroutes_core"


@dataclass
class Config:
    """Route table configuration."""

    # Route definitions, registered in list order
    routes: List[Dict[str, Any]] = field(default_factory=list)

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> T:
        """Create config from dictionary."""
        data = data or {}
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls: Type[T], prefix: str = "PAGEROUTES_") -> T:
        """Load config from environment variables.

        Only scalar settings come from the environment; routes do not.
        """
        data = {}

        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()
                if config_key == "routes":
                    logger.warning(f"Ignoring {key}: routes cannot be set from the environment")
                    continue
                data[config_key] = value

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "routes": [dict(r) for r in self.routes],
            "log_level": self.log_level,
        }

    def merge(self, other: "Config") -> "Config":
        """Merge with another config (other's non-default values win)."""
        data = self.to_dict()
        defaults = Config()
        for key, value in other.to_dict().items():
            if value != getattr(defaults, key):
                data[key] = value
        return Config.from_dict(data)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "PAGEROUTES_",
) -> Config:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = Config()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = Config.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = Config.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    env_config = Config.from_env(env_prefix)
    config = config.merge(env_config)

    return config


def configure_logging(config: Config) -> None:
    """Apply the configured log level to the package logger."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level: {config.log_level}")
        return
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def build_route_table(config: Config) -> RouteTable:
    """Register every configured route, in order, into a new table."""
    table = RouteTable()
    for definition in config.routes:
        table.add(definition)
    logger.info(f"Loaded {len(table)} routes")
    return table


__all__ = [
    "Config",
    "load_config",
    "configure_logging",
    "build_route_table",
]
