# semlog/config/__init__.py
"""
semlog Configuration

Design principles:
1. Code holds every default; YAML only overrides
2. CLI options override YAML
3. Configuration objects are frozen
"""

from .render import RenderConfig, OUTPUT_FORMATS, TEXT, HTML
from .loader import SemlogConfig, load_config, CONFIG_ENV_VAR
from .validator import validate_render_config, ConfigIssue, has_errors

__all__ = [
    "RenderConfig",
    "OUTPUT_FORMATS",
    "TEXT",
    "HTML",
    "SemlogConfig",
    "load_config",
    "CONFIG_ENV_VAR",
    "validate_render_config",
    "ConfigIssue",
    "has_errors",
]
