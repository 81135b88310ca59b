"""Tests for CLI helper functions."""

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest

from line_route_map.adapters.config import AppConfig
from line_route_map.cli import build_parser, find_line, main, parse_station, path_to_dict
from line_route_map.domain.models import (
    Bounds,
    RoutePath,
    Segment,
    SegmentFailure,
    Station,
)


class TestParseStation:
    """Tests for station argument parsing."""

    def test_when_named_then_name_and_coordinates_are_set(self) -> None:
        """Given 'name=lat,lon', when parsing, then the station carries the name."""
        station = parse_station("Bab El Had=34.0209,-6.8416")

        assert station == Station(name="Bab El Had", latitude=34.0209, longitude=-6.8416)

    def test_when_unnamed_then_coordinates_become_the_name(self) -> None:
        """Given 'lat,lon', when parsing, then the raw text is used as name."""
        station = parse_station("34.0181,-6.8227")

        assert station.name == "34.0181,-6.8227"
        assert station.coordinates == (34.0181, -6.8227)

    @pytest.mark.parametrize("value", ["Hassan", "1,2,3", "A=north,east", ""])
    def test_when_malformed_then_raises_argument_type_error(self, value: str) -> None:
        """Given malformed text, when parsing, then argparse gets a type error."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_station(value)


def test_path_to_dict_reports_segments_and_fallbacks() -> None:
    """Given a path with one fallback, when serializing, then the failure is included."""
    a = Station(name="A", latitude=0.0, longitude=0.0)
    b = Station(name="B", latitude=0.0, longitude=1.0)
    c = Station(name="C", latitude=0.0, longitude=2.0)
    path = RoutePath(
        points=[(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)],
        bounds=Bounds(south=0.0, west=0.0, north=0.0, east=2.0),
        segments=[
            Segment(start=a, end=b, points=[(0.0, 0.0), (0.0, 1.0)]),
            Segment(
                start=b,
                end=c,
                points=[(0.0, 1.0), (0.0, 2.0)],
                failure=SegmentFailure(kind="transport", reason="timeout"),
            ),
        ],
        distance_km=222.3899,
        estimated_duration_minutes=334,
    )

    result = path_to_dict(path)

    assert result["points"] == [[0.0, 0.0], [0.0, 1.0], [0.0, 2.0]]
    assert result["bounds"] == [[0.0, 0.0], [0.0, 2.0]]
    assert result["distance_km"] == 222.39
    assert result["segments"][0]["fallback"] is None
    assert result["segments"][1]["fallback"] == {
        "kind": "transport",
        "reason": "timeout",
        "status_code": None,
    }


def test_parser_accepts_route_with_stations() -> None:
    """Given route arguments, when parsing, then stations are converted."""
    args = build_parser().parse_args(["--config", "x.toml", "route", "0,0", "B=0,1", "--json"])

    assert args.command == "route"
    assert args.config == "x.toml"
    assert args.json is True
    assert [s.name for s in args.stations] == ["0,0", "B"]


def test_find_line_uses_example_config() -> None:
    """Given the example config, when finding lines, then known names resolve and others do not."""
    example = Path(__file__).resolve().parent.parent / "config.example.toml"
    config = AppConfig(config_file=str(example))

    line = find_line(config, "L2")

    assert line is not None
    assert line.stations[-1].name == "Hay Riad"
    assert find_line(config, "L99") is None


def test_route_command_applies_routing_overrides_from_config(tmp_path: Path) -> None:
    """Given --config with [routing], when running route, then the overrides reach the renderer."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[routing]\nsegment_delay_ms = 500\nosrm_profile = "foot"\n', encoding="utf-8"
    )

    with patch("line_route_map.cli.cmd_path", return_value=0) as mock_cmd_path:
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config_path), "route", "0,0", "0,1"])

    assert exc_info.value.code == 0
    config = mock_cmd_path.call_args.args[0]
    assert config.segment_delay_ms == 500
    assert config.osrm_profile == "foot"
