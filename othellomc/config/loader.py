"""Hydra-based config loading with Pydantic validation.

Flow: Hydra composes the YAML (defaults, overrides) → plain dict → Pydantic model.

Usage:
    config = load_config(MatchConfig, "configs", "match", overrides=["games=4"])
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import OmegaConf
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def split_config_path(config_arg: str) -> tuple[str, str]:
    """Split a CLI config argument into (config_dir, config_name).

    Accepts 'configs/match.yaml', 'configs/match' or 'match.yaml'.
    """
    path = Path(config_arg)
    config_dir = str(path.parent) if path.parent.name else "."
    return config_dir, path.stem


def load_config(
    model_class: type[T],
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> T:
    """Compose a YAML config with Hydra and validate it with ``model_class``.

    Args:
        model_class: Pydantic model to validate against.
        config_path: Directory holding the YAML files.
        config_name: File name without the .yaml suffix.
        overrides: Hydra-style overrides, e.g. ``["search.budget.max_iterations=50"]``.

    Returns:
        Validated config instance.

    Raises:
        pydantic.ValidationError: If the composed config does not match the model.
    """
    config_dir = Path(config_path).resolve()

    # Hydra keeps global state; clear it so repeated calls work. Not thread-safe.
    GlobalHydra.instance().clear()
    try:
        initialize_config_dir(config_dir=str(config_dir), version_base=None)
        cfg = compose(config_name=config_name, overrides=overrides or [])
        return model_class.model_validate(OmegaConf.to_container(cfg, resolve=True))
    finally:
        GlobalHydra.instance().clear()
