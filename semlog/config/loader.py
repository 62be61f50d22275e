# semlog/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
- Configuration objects are frozen
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from semlog.core.errors import InvalidOptionError
from semlog.tree.registry import DEFAULT_TIMING_KEYS
from semlog.utils.formatting import parse_duration
from .render import RenderConfig
from .validator import validate_render_config, ConfigIssue


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SEMLOG_CONFIG"

# YAML key -> RenderConfig field
_RENDER_KEYS = {
    "max_depth": "max_depth",
    "depth": "max_depth",
    "expand_types": "expand_types",
    "expand": "expand_types",
    "threshold": "min_duration",
    "full": "full_depth",
    "full_depth": "full_depth",
    "max_lines": "max_lines",
    "lines": "max_lines",
    "format": "output_format",
}


@dataclass(frozen=True)
class SemlogConfig:
    """
    Unified semlog configuration.

    All fields have code defaults - YAML is optional.
    """

    render: RenderConfig = field(default_factory=RenderConfig)
    timing_keys: Tuple[str, ...] = DEFAULT_TIMING_KEYS

    @classmethod
    def default(cls) -> "SemlogConfig":
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "SemlogConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $SEMLOG_CONFIG
                2. ~/.semlog/config.yml

        Returns:
            SemlogConfig instance (always has code defaults as fallback)

        Raises:
            InvalidOptionError: an explicit config_path does not exist, or a
                value in the file has the wrong type
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        if "render" in yaml_data:
            config = replace(config, render=_merge_render(config.render, yaml_data["render"]))

        if "timing_keys" in yaml_data:
            keys = yaml_data["timing_keys"]
            if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
                raise InvalidOptionError("timing_keys must be a list of strings", option="timing_keys")
            config = replace(config, timing_keys=tuple(keys))

        for key in yaml_data:
            if key not in ("render", "timing_keys"):
                logger.warning("Ignoring unknown config key: %s", key)

        return config

    def validate(self) -> list[ConfigIssue]:
        return validate_render_config(self.render)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "render": self.render.to_dict(),
            "timing_keys": list(self.timing_keys),
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error unless explicit)"""
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise InvalidOptionError(f"Config file not found: {path}", option="config")
        paths = [path]
    else:
        paths = []
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            paths.append(Path(env_path))
        paths.append(Path.home() / ".semlog" / "config.yml")

    for path in paths:
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Failed to load config %s, using defaults: %s", path, e)
                return None
            if data is not None and not isinstance(data, dict):
                logger.warning("Config %s is not a mapping, using defaults", path)
                return None
            logger.debug("Loaded config from %s", path)
            return data

    return None


def _merge_render(default: RenderConfig, yaml_data: Any) -> RenderConfig:
    """Merge the YAML 'render' section into the default render config"""
    if not isinstance(yaml_data, dict):
        raise InvalidOptionError("render section must be a mapping", option="render")

    updates: Dict[str, Any] = {}
    for key, value in yaml_data.items():
        target = _RENDER_KEYS.get(key)
        if target is None:
            logger.warning("Ignoring unknown render option: %s", key)
            continue
        updates[target] = _coerce(target, key, value)

    return replace(default, **updates)


def _coerce(target: str, key: str, value: Any) -> Any:
    try:
        if target == "min_duration":
            return parse_duration(str(value))
        if target == "expand_types":
            if isinstance(value, str):
                return frozenset([value])
            return frozenset(str(v) for v in value)
        if target == "full_depth":
            return bool(value)
        if target in ("max_depth", "max_lines"):
            if isinstance(value, bool):
                raise ValueError(f"expected a number, got {value!r}")
            return int(value)
        return str(value)
    except (TypeError, ValueError) as e:
        raise InvalidOptionError(f"Invalid value for render.{key}: {e}", option=f"render.{key}") from e


def load_config(config_path: Optional[Path] = None) -> SemlogConfig:
    """
    Load semlog configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        SemlogConfig instance (always has code defaults, frozen)
    """
    return SemlogConfig.from_yaml(config_path)


__all__ = [
    "SemlogConfig",
    "load_config",
    "CONFIG_ENV_VAR",
]
