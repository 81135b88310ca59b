"""Tests for loading line definitions."""

from pathlib import Path

import pytest

from line_route_map.adapters.config import AppConfig, LineConfigurationLoader


@pytest.fixture
def config() -> AppConfig:
    """Config with a custom default line color."""
    return AppConfig(config_file=None, line_color="#123456")


class TestLoadStation:
    """Tests for single station parsing."""

    def test_when_station_valid_then_returns_station(self) -> None:
        """Given name and coordinates, when loading, then a Station is returned."""
        station = LineConfigurationLoader.load_station_from_data(
            {"name": "Hassan", "latitude": 34.0181, "longitude": "-6.8227"}
        )

        assert station is not None
        assert station.name == "Hassan"
        assert station.coordinates == (34.0181, -6.8227)

    @pytest.mark.parametrize(
        "data",
        [
            "Hassan",
            {"latitude": 1.0, "longitude": 2.0},
            {"name": "", "latitude": 1.0, "longitude": 2.0},
        ],
    )
    def test_when_station_has_no_name_then_returns_none(self, data: object) -> None:
        """Given a nameless entry, when loading, then it is skipped."""
        assert LineConfigurationLoader.load_station_from_data(data) is None

    def test_when_coordinates_invalid_then_warns_and_returns_none(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given a non-numeric latitude, when loading, then a warning is logged."""
        with caplog.at_level("WARNING"):
            station = LineConfigurationLoader.load_station_from_data(
                {"name": "Broken", "latitude": "north", "longitude": 2.0}
            )

        assert station is None
        assert "Skipping station 'Broken'" in caplog.text


class TestLoadLine:
    """Tests for line parsing."""

    def test_when_line_has_no_color_then_config_default_is_used(self, config: AppConfig) -> None:
        """Given a line without color, when loading, then the configured default applies."""
        line = LineConfigurationLoader.load_line_from_data(
            {
                "name": "L1",
                "title": "Bab El Had - Agdal",
                "stations": [
                    {"name": "A", "latitude": 0.0, "longitude": 0.0},
                    {"name": "B", "latitude": 0.0, "longitude": 1.0},
                ],
            },
            config,
        )

        assert line.color == "#123456"
        assert line.title == "Bab El Had - Agdal"
        assert [s.name for s in line.stations] == ["A", "B"]

    def test_when_line_has_no_name_then_raises(self, config: AppConfig) -> None:
        """Given a line without name, when loading, then ValueError is raised."""
        with pytest.raises(ValueError, match="must have a 'name' field"):
            LineConfigurationLoader.load_line_from_data({"stations": []}, config)

    def test_when_too_few_valid_stations_then_raises(self, config: AppConfig) -> None:
        """Given only one usable station, when loading, then ValueError is raised."""
        data = {
            "name": "L9",
            "stations": [
                {"name": "A", "latitude": 0.0, "longitude": 0.0},
                {"name": "B", "latitude": None, "longitude": 1.0},
            ],
        }

        with pytest.raises(ValueError, match="Line 'L9' needs at least 2 valid stations, got 1"):
            LineConfigurationLoader.load_line_from_data(data, config)


def test_load_reads_example_config() -> None:
    """Given the shipped example config, when loading, then its lines are returned in order."""
    example = Path(__file__).resolve().parent.parent / "config.example.toml"
    lines = LineConfigurationLoader.load(AppConfig(config_file=str(example)))

    assert [line.name for line in lines] == ["L1", "L2"]
    assert lines[0].stations[0].name == "Bab El Had"
    assert lines[1].color == "#16a34a"
