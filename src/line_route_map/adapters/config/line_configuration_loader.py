"""Line configuration loader."""

import logging
from typing import Any

from line_route_map.adapters.config.app_config import AppConfig
from line_route_map.domain.models.line_configuration import LineConfiguration
from line_route_map.domain.models.station import Station

logger = logging.getLogger(__name__)


class LineConfigurationLoader:
    """Loads line configurations from app config."""

    @staticmethod
    def load_station_from_data(station_data: Any) -> Station | None:
        """Load a single station, or None if it lacks a name or numeric coordinates."""
        if not isinstance(station_data, dict):
            return None

        name = station_data.get("name")
        if not name:
            return None

        try:
            latitude = float(station_data["latitude"])
            longitude = float(station_data["longitude"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Skipping station '{name}': missing or invalid coordinates")
            return None

        return Station(name=str(name), latitude=latitude, longitude=longitude)

    @staticmethod
    def load_line_from_data(line_data: dict[str, Any], config: AppConfig) -> LineConfiguration:
        """Load one line definition.

        Raises:
            ValueError: If the line has no name or fewer than 2 valid stations.
        """
        name = line_data.get("name")
        if not name:
            raise ValueError("All lines must have a 'name' field")

        stations = []
        for station_data in line_data.get("stations", []):
            station = LineConfigurationLoader.load_station_from_data(station_data)
            if station is not None:
                stations.append(station)

        if len(stations) < 2:
            raise ValueError(f"Line '{name}' needs at least 2 valid stations, got {len(stations)}")

        color = line_data.get("color") or config.line_color
        return LineConfiguration(
            name=str(name),
            stations=stations,
            color=str(color),
            title=line_data.get("title"),
        )

    @staticmethod
    def load(config: AppConfig) -> list[LineConfiguration]:
        """Load all line configurations from the config file."""
        return [
            LineConfigurationLoader.load_line_from_data(line_data, config)
            for line_data in config.get_lines_config()
        ]
