"""Runtime configuration for terminai."""

from .settings import DEFAULT_CONFIG_PATH, Config, load_config

__all__ = ["Config", "load_config", "DEFAULT_CONFIG_PATH"]
