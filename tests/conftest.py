from __future__ import annotations

from pathlib import Path
from textwrap import dedent
from typing import Any

from setsmaps.earthquakes import FeedConfig


def write_census_file(tmp_path: Path, content: str, filename: str = "census.txt") -> Path:
    path = tmp_path / filename
    path.write_text(dedent(content).strip() + "\n")
    return path


def build_census_source() -> str:
    """Small census fixture with one short row and one blank degree."""
    return dedent(
        """
        39, State-gov, 77516, Bachelors, 13
        50, Self-emp-not-inc, 83311, Bachelors, 13
        38, Private, 215646, HS-grad, 9
        53, Private, 234721, 11th, 7
        28, Private
        37, Private, 284582, , 14
        31, Private, 45781, Masters, 14
        """
    ).strip()


def make_feature(place: Any = "10 km N of Somewhere, CA", mag: Any = 1.5) -> dict[str, Any]:
    """Build one GeoJSON feature with the given place and magnitude."""
    return {
        "type": "Feature",
        "properties": {"mag": mag, "place": place, "type": "earthquake"},
        "geometry": {"type": "Point", "coordinates": [-117.0, 35.0, 5.0]},
    }


def build_feed_payload(*features: dict[str, Any]) -> dict[str, Any]:
    """Wrap features in a minimal FeatureCollection."""
    return {
        "type": "FeatureCollection",
        "metadata": {"title": "USGS All Earthquakes, Past Day", "count": len(features)},
        "features": list(features),
    }


def patch_cli_feed(
    monkeypatch: Any,
    cli_module: Any,
    *,
    payload: dict[str, Any] | None = None,
    error: Exception | None = None,
    captured_configs: list[FeedConfig] | None = None,
) -> None:
    """Patch the CLI feed fetcher with a configurable test double."""

    def fake_fetch_feed(config: FeedConfig | None = None, **_kwargs: Any) -> dict[str, Any]:
        if captured_configs is not None and config is not None:
            captured_configs.append(config)
        if error is not None:
            raise error
        return payload if payload is not None else build_feed_payload()

    monkeypatch.setattr(cli_module, "fetch_feed", fake_fetch_feed)
