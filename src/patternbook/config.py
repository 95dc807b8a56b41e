"""
patternbook Configuration
=========================

This module handles configuration loading for the lesson catalogue.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    PATTERNBOOK_CONFIG             -> path of the YAML file to load
    PATTERNBOOK_LOG_LEVEL          -> logging.level
    PATTERNBOOK_LOG_FORMAT         -> logging.format
    PATTERNBOOK_WATCH_HISTORY      -> video.watch_history_backend
    PATTERNBOOK_FRAME_TIME         -> video.frame_time
    PATTERNBOOK_INVENTORY_CAPACITY -> inventory.max_items
    PATTERNBOOK_RIDE_STEP_DELAY    -> demos.ride_step_delay_seconds

Settings are never loaded at import time. The demo runner loads them once
and hands them to the lessons that need them.

Example:
    from patternbook.config import load_config, setup_logging

    settings = load_config()
    setup_logging(settings)
    print(settings.video.watch_history_backend)
"""

import os
import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class AppInfoConfig(BaseModel):
    """Catalogue identification."""

    name: str = Field(default="patternbook", description="Catalogue name")
    version: str = Field(default="v0.1.0", description="Catalogue version")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class VideoConfig(BaseModel):
    """Video player lesson configuration."""

    frame_time: int = Field(
        default=10,
        gt=0,
        description="Length of one generated frame in timestamp units",
    )
    watch_history_backend: str = Field(
        default="memory",
        description="Watch history backend: 'memory' (keyed store) or 'stub' (never persists)",
    )


class InventoryConfig(BaseModel):
    """Iterator lesson configuration."""

    max_items: int = Field(
        default=100,
        ge=1,
        description="Maximum number of products the inventory accepts",
    )


class DemoConfig(BaseModel):
    """Demo pacing configuration."""

    ride_step_delay_seconds: float = Field(
        default=0.0,
        ge=0,
        description="Pause between ride command scenarios",
    )


class Settings(BaseModel):
    """
    Main settings class for patternbook.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    app: AppInfoConfig = Field(default_factory=AppInfoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    video: VideoConfig = Field(default_factory=VideoConfig)
    inventory: InventoryConfig = Field(default_factory=InventoryConfig)
    demos: DemoConfig = Field(default_factory=DemoConfig)
    app_config: Dict[str, str] = Field(
        default_factory=dict,
        description="Initial key/value pairs for the AppConfig lesson",
    )


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, uses PATTERNBOOK_CONFIG
            or searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        config_path = os.environ.get("PATTERNBOOK_CONFIG")

    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Logging settings
    if env_log := os.environ.get("PATTERNBOOK_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("PATTERNBOOK_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt

    # Video settings
    if env_backend := os.environ.get("PATTERNBOOK_WATCH_HISTORY"):
        config_data.setdefault("video", {})["watch_history_backend"] = env_backend
    if env_frame := os.environ.get("PATTERNBOOK_FRAME_TIME"):
        config_data.setdefault("video", {})["frame_time"] = int(env_frame)

    # Inventory settings
    if env_cap := os.environ.get("PATTERNBOOK_INVENTORY_CAPACITY"):
        config_data.setdefault("inventory", {})["max_items"] = int(env_cap)

    # Demo settings
    if env_delay := os.environ.get("PATTERNBOOK_RIDE_STEP_DELAY"):
        config_data.setdefault("demos", {})["ride_step_delay_seconds"] = float(env_delay)


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
