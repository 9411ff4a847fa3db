"""
Cached YAML configuration loader.

The configs/ directory sits at the repository root. An installed copy of the
package can point elsewhere with TROLL_TOPICS_CONFIG_DIR.

Usage:
    from troll_topics.config._loader import load_yaml_section

    # Whole file
    config = load_yaml_section("config.yaml")

    # One top-level section
    trimming = load_yaml_section("features/preprocessing.yaml", "preprocessing")
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "TROLL_TOPICS_CONFIG_DIR"


def get_configs_dir() -> Path:
    """Directory holding config.yaml and features/*.yaml."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path(__file__).parent.parent.parent / "configs"


@lru_cache(maxsize=16)
def load_yaml_section(config_file: str, section: str | None = None) -> dict[str, Any]:
    """
    Load and cache a YAML config file.

    Args:
        config_file: Path relative to the configs directory
        section: Optional top-level key to extract

    Returns:
        Mapping of settings; empty when the file or section is absent, so
        field defaults apply

    Raises:
        ValueError: If the file or section is not a mapping
    """
    config_path = get_configs_dir() / config_file
    if not config_path.exists():
        logger.debug(f"Config file not found, using built-in defaults: {config_path}")
        return {}

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping at the top level")

    if section is None:
        return data
    value = data.get(section) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Section {section!r} in {config_path} must be a mapping")
    return value


def clear_config_cache() -> None:
    """Forget loaded files so the next access re-reads them."""
    load_yaml_section.cache_clear()
