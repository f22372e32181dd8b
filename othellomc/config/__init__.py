"""Configuration: strict Pydantic base model and Hydra YAML loading."""

from __future__ import annotations

from othellomc.config.base import StrictBaseModel
from othellomc.config.loader import load_config, split_config_path

__all__ = [
    "StrictBaseModel",
    "load_config",
    "split_config_path",
]
