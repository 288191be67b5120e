"""
Configuration loading for prioritizer.

Settings live in a YAML file (prioritizer/config/prioritize.yaml by default,
override with the PRIORITIZER_CONFIG environment variable). Environment values
are interpolated with OmegaConf's ``oc.env`` resolver, so a .env file in the
working directory can set log and snapshot locations.

Example:
    from prioritizer.utils.config import load_settings

    settings = load_settings()
    settings.events.job_initiated_frequency  # 5
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()
CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "prioritize.yaml"
DEFAULT_JOB_TYPES_PATH = CONFIG_DIR / "job_types.yaml"
PRIORITIZER_CONFIG = Path(os.getenv("PRIORITIZER_CONFIG", str(DEFAULT_CONFIG_PATH)))


def load_settings(config_path: Path = None) -> DictConfig:
    """
    Load prioritizer settings.

    Args:
        config_path: Optional path to a settings file (defaults to PRIORITIZER_CONFIG)

    Returns:
        Settings as an OmegaConf DictConfig with env interpolations resolved
    """
    if config_path is None:
        config_path = PRIORITIZER_CONFIG

    settings = OmegaConf.load(config_path)
    OmegaConf.resolve(settings)
    return settings


def resolve_job_types_path(settings: DictConfig) -> Path:
    """Return the configured job type registry file, falling back to the bundled one."""
    configured: Optional[str] = settings.get("job_types_path")
    if configured:
        return Path(configured)
    return DEFAULT_JOB_TYPES_PATH
