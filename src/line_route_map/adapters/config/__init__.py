"""Configuration adapters."""

from line_route_map.adapters.config.app_config import AppConfig
from line_route_map.adapters.config.line_configuration_loader import LineConfigurationLoader

__all__ = ["AppConfig", "LineConfigurationLoader"]
