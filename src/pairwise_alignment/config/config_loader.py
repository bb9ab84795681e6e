"""
Configuration loader for pairwise alignment.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'alignment': {
        'mode': 'global',
        'alphabet': 'protein',
    },
    'scoring': {
        'matrix': 'BLOSUM62',
        'match': 1,
        'mismatch': -1,
        'gap_model': 'affine',
        'gap_open': -10,
        'gap_extend': -1,
    },
    'io': {
        'output_dir': None,
        'line_width': 50,
    },
    'debug': {
        'log_level': 'INFO',
        'verbose': False,
    },
    'logging': {
        'log_dir': None,
    },
}


def merge_config(base: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Return `base` updated section by section with `overrides`.

    Mapping values are merged one level deep; anything else replaces the
    value in `base`. Neither argument is modified.
    """
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class ConfigLoader:
    """Loads and manages configuration from YAML files."""

    def __init__(self, config_path=DEFAULT_CONFIG_PATH):
        self.config_path = Path(config_path)
        self.config: Dict[str, Any] = {}
        self.load_config()

    def load_config(self):
        """Load configuration from YAML file, falling back to defaults if it is missing."""
        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Config file {self.config_path} not found. Using defaults.")
            loaded = {}

        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid YAML format in {self.config_path}")

        self.config = merge_config(self._get_default_config(), loaded)

    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration used for missing files and sections."""
        return copy.deepcopy(DEFAULT_CONFIG)

    def get_alignment_params(self) -> Dict[str, Any]:
        """Get alignment mode and alphabet."""
        return self.config.get('alignment', {})

    def get_scoring_params(self) -> Dict[str, Any]:
        """Get substitution matrix and gap parameters."""
        return self.config.get('scoring', {})

    def get_io_params(self) -> Dict[str, Any]:
        return self.config.get('io', {})

    def get_debug_params(self) -> Dict[str, Any]:
        return self.config.get('debug', {})

    def get_logging_params(self) -> Dict[str, Any]:
        return self.config.get('logging', {})


_config_loader: Optional[ConfigLoader] = None


def get_config() -> ConfigLoader:
    """Get the shared config loader instance, loading the packaged defaults on first use."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def reload_config(config_path: Optional[str] = None) -> ConfigLoader:
    """Reload configuration from file."""
    global _config_loader
    if config_path:
        _config_loader = ConfigLoader(config_path)
    else:
        get_config().load_config()
    return _config_loader
