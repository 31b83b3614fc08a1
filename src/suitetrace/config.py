"""Configuration management for suitetrace."""

import tomllib
from pathlib import Path
from typing import Literal

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILE, DEFAULT_AUTHOR, DEFAULT_AUTOSAVE_INTERVAL


class ConfigError(Exception):
    """Config file exists but cannot be read or validated."""


class ProjectConfig(BaseModel):
    """Project-level configuration."""

    name: str = "unnamed-suite"


class VersioningConfig(BaseModel):
    """Configuration for version history and auto-save."""

    author: str = DEFAULT_AUTHOR  # Until an identity provider supplies one
    autosave_interval_seconds: float = Field(default=DEFAULT_AUTOSAVE_INTERVAL, gt=0)


class ExportConfig(BaseModel):
    """Configuration for test case export."""

    default_format: Literal["csv", "json"] = "csv"


class SuiteConfig(BaseModel):
    """Root configuration for suitetrace."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    versioning: VersioningConfig = Field(default_factory=VersioningConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)


def load_config(config_dir: Path) -> SuiteConfig:
    """Load config from .suitetrace/config.toml.

    Args:
        config_dir: Path to .suitetrace directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = config_dir / CONFIG_FILE
    if not config_path.exists():
        return SuiteConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return SuiteConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(config_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        config_dir: Path to .suitetrace directory

    Returns:
        Path to the written config file
    """
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / CONFIG_FILE
    template = {
        "project": {"name": "your-suite"},
        # Author recorded on saved versions; auto-save fires on this cadence
        "versioning": {
            "author": DEFAULT_AUTHOR,
            "autosave_interval_seconds": DEFAULT_AUTOSAVE_INTERVAL,
        },
        "export": {"default_format": "csv"},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
