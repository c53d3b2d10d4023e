"""YAML config loader with environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from relay.config.schema import RelayConfig

PORT_ENV_VAR = "PORT"


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> RelayConfig:
    """Load and validate config from an optional YAML file.

    A ``PORT`` environment variable, when set, wins over the file.
    """
    raw: dict = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    env = os.environ if env is None else env
    port = env.get(PORT_ENV_VAR)
    if port:
        raw["port"] = port

    return RelayConfig(**raw)
