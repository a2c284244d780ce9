"""
Dashboard Configuration
Loads the YAML display config (chart colours, filter options, bar limits).
"""

from pathlib import Path
from typing import Dict, List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from campaign_dashboard.errors import ConfigError


class StatusOption(BaseModel):
    value: str
    label: str


def _default_status_options() -> List[StatusOption]:
    return [
        StatusOption(value="all", label="All Statuses"),
        StatusOption(value="active", label="Active"),
        StatusOption(value="paused", label="Paused"),
        StatusOption(value="completed", label="Completed"),
    ]


class DisplayConfig(BaseModel):
    """Presentation settings; the filter/aggregate results never depend on them."""
    title: str = "Campaign Monitoring Dashboard"
    status_options: List[StatusOption] = Field(default_factory=_default_status_options)
    status_colors: Dict[str, str] = Field(default_factory=lambda: {
        "active": "#10b981",
        "paused": "#f59e0b",
        "completed": "#6b7280",
    })
    fallback_status_color: str = "#9ca3af"
    platform_palette: List[str] = Field(default_factory=lambda: [
        "#3b82f6", "#8b5cf6", "#ec4899", "#f97316", "#14b8a6",
    ])
    budget_bar_limit: int = 5
    name_max_length: int = 25

    @field_validator("platform_palette")
    @classmethod
    def palette_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("platform_palette must contain at least one colour")
        return v

    @field_validator("budget_bar_limit", "name_max_length")
    @classmethod
    def positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v


def load_display_config(path: str) -> DisplayConfig:
    """
    Load display configuration from a YAML file.

    A missing file yields the defaults.

    Args:
        path: Path to dashboard YAML config

    Returns:
        DisplayConfig instance

    Raises:
        ConfigError: If the file is not valid YAML or fails validation
    """
    p = Path(path)
    if not p.exists():
        return DisplayConfig()

    try:
        data = yaml.safe_load(p.read_text(encoding="utf8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        return DisplayConfig()
    if not isinstance(data, dict):
        raise ConfigError("Dashboard config must be a YAML mapping/object")

    try:
        return DisplayConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid dashboard config {path}: {e}") from e
