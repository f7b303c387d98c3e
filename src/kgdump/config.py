from __future__ import annotations

import os
from enum import Enum
from logging import getLogger
from pathlib import Path
from typing import Optional, Type, TypeVar, Any, Dict, Iterable
from pydantic import BaseModel, Field
from yaml import safe_load, YAMLError
from dotenv import load_dotenv

logger = getLogger(__name__)

T = TypeVar("T", bound="KgDumpConfig")

HOME_CONFIG_DIR = Path("~/.kgconf/").expanduser()


class EmptyTokenPolicy(str, Enum):
    """How to treat object tokens too short for the literal form they start."""
    REJECT = "reject"
    OTHER = "other"


class KgDumpConfig(BaseModel):
    """
    The configuration for kgdump.
    """
    empty_token_policy: EmptyTokenPolicy = Field(
        EmptyTokenPolicy.REJECT, description="Policy for empty or truncated object tokens"
    )
    log_level: str = Field("INFO", description="Logging level")
    log_file: Optional[Path] = Field(None, description="Optional log file, stderr if unset")


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = safe_load(f)  # handles YAML merges/anchors too
    return data or {}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two dicts. Dicts merge recursively; for non-dicts (incl. lists),
    the override wins entirely.
    """
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class ConfigLoader:
    """
    Layered config loader with deep merging.

    Load order (low → high priority):
      1) base:   ~/.kgconf/{name}.yaml (or .yml)
      2) cwd:    ./{name}.yaml (or .yml)
      3) file:   explicit `path` if provided
      4) env:    ./{name}.env is loaded into the environment, then YAML content
                 from {NAME}_CONFIG, then single fields from {NAME}_{field}

    Later layers override earlier ones (deep merge).
    """
    def __init__(self, config_name: str = "kgdump"):
        self.config_name = config_name or "kgdump"

    def _candidate_paths(self, path: Optional[str | Path]) -> Iterable[Path]:
        # support both .yaml and .yml
        base = [
            HOME_CONFIG_DIR / f"{self.config_name}.yaml",
            HOME_CONFIG_DIR / f"{self.config_name}.yml",
        ]
        cwd = [
            Path.cwd() / f"{self.config_name}.yaml",
            Path.cwd() / f"{self.config_name}.yml",
        ]
        explicit = [Path(path).expanduser()] if path else []

        # merge order: base → cwd → explicit
        return base + cwd + explicit

    def _env_layer(self, config_class: Type[T]) -> Dict[str, Any]:
        env_file = Path.cwd() / f"{self.config_name}.env"
        if env_file.exists():
            logger.debug(f"Loading config-specific .env from: {env_file}")
            load_dotenv(env_file, override=True)

        env_config: Dict[str, Any] = {}

        # a single {NAME}_CONFIG env var with YAML content
        env_var_name = f"{self.config_name.upper()}_CONFIG"
        env_content = os.environ.get(env_var_name)
        if env_content:
            try:
                d = safe_load(env_content)
            except YAMLError as e:
                raise ValueError(f"Failed to parse {env_var_name}: {e}") from e
            if isinstance(d, dict):
                env_config = d

        # individual env vars for each field in the config class
        env_prefix = f"{self.config_name.upper()}_"
        for field_name in config_class.model_fields.keys():
            env_value = os.environ.get(env_prefix + field_name) or os.environ.get(env_prefix + field_name.upper())
            if env_value is not None:
                env_config[field_name] = env_value

        return env_config

    def load_config(self, config_class: Type[T], path: Optional[str | Path] = None) -> T:
        if path and not Path(path).expanduser().exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        merged: Dict[str, Any] = {}
        for p in self._candidate_paths(path):
            d = _read_yaml(p)
            if d:
                logger.debug(f"Loaded config layer {p}")
                merged = _deep_merge(merged, d)

        merged = _deep_merge(merged, self._env_layer(config_class))

        # If nothing found, the defaults from the model are used
        return config_class(**merged)


_config_singleton: Optional[KgDumpConfig] = None
_DEFAULT_CONFIG = KgDumpConfig()


def load_config(path: Optional[str | Path] = None) -> KgDumpConfig:
    """
    Load the configuration for kgdump.
    """
    return ConfigLoader("kgdump").load_config(KgDumpConfig, path)


def get_config() -> KgDumpConfig:
    """
    Process-wide configuration. Model defaults until `set_config` installs one;
    files and environment are only read by an explicit `load_config`.
    """
    if _config_singleton is None:
        return _DEFAULT_CONFIG
    return _config_singleton


def set_config(config: Optional[KgDumpConfig]) -> None:
    global _config_singleton
    _config_singleton = config
