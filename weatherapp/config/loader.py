"""YAML config loader that resolves the API key from the environment."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.defaults import API_KEY_ENV
from weatherapp.config.schema import AppConfig


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and validate config from an optional YAML file.

    The API key is never read from the file: it is looked up in the
    environment variable named by ``api_key_env``. A missing key is not an
    error here; requests check for it individually.
    """
    if environ is None:
        environ = os.environ

    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Config root must be a mapping: {path}")
        if "api_key" in raw:
            raise ValueError(
                "api_key must not be set in the config file; "
                "export it in the environment instead"
            )

    env_name = raw.get("api_key_env") or API_KEY_ENV
    raw["api_key"] = environ.get(env_name, "").strip()
    return AppConfig(**raw)


def masked_config_dict(config: AppConfig) -> dict[str, Any]:
    """Config as plain data with the API key hidden."""
    data = config.model_dump()
    data["api_key"] = "***" if config.has_api_key else ""
    return data
