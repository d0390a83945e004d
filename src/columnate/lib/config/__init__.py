"""Configuration loading."""

from columnate.lib.config.settings import ColumnateConfig, load_config

__all__ = ["ColumnateConfig", "load_config"]
