# semlog/config/validator.py
"""
Configuration Validator

Validates render configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass

from .render import RenderConfig, OUTPUT_FORMATS


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "render.max_depth"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_render_config(config: RenderConfig) -> List[ConfigIssue]:
    """
    Validate render configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if config.max_depth < 0:
        issues.append(ConfigIssue(
            level="error",
            path="render.max_depth",
            message="depth must be 0 or greater",
        ))

    if config.min_duration < 0:
        issues.append(ConfigIssue(
            level="error",
            path="render.threshold",
            message="threshold must be 0 or greater",
            hint="Use values like 10ms or 0.5s",
        ))

    if config.max_lines < 0:
        issues.append(ConfigIssue(
            level="error",
            path="render.max_lines",
            message="lines must be 0 or greater (0 = no limit)",
        ))

    if config.output_format not in OUTPUT_FORMATS:
        issues.append(ConfigIssue(
            level="error",
            path="render.format",
            message=f"format must be one of {', '.join(OUTPUT_FORMATS)}, got '{config.output_format}'",
        ))

    # full_depth already shows everything
    if config.full_depth and config.expand_types:
        issues.append(ConfigIssue(
            level="warn",
            path="render.expand_types",
            message="expand_types has no effect when full_depth is set",
            hint="Drop --full to limit depth and expand only the listed types",
        ))

    return issues


def has_errors(issues: List[ConfigIssue]) -> bool:
    return any(issue.level == "error" for issue in issues)
