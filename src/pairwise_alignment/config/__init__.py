from .config_loader import (
    ConfigLoader,
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    merge_config,
    get_config,
    reload_config
)

__all__ = [
    'ConfigLoader',
    'DEFAULT_CONFIG',
    'DEFAULT_CONFIG_PATH',
    'merge_config',
    'get_config',
    'reload_config',
]
