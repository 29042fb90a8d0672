# suggestion_builder/utils/__init__.py
# config + logging helpers shared by the CLI

from .config_manager import Config, ConfigError
from .logger_utils import Log, setup_logging

__all__ = ["Config", "ConfigError", "Log", "setup_logging"]
