"""Shared package-level defaults used across CLI and exercise modules."""

from __future__ import annotations

PAIR_SEPARATOR = " & "

DEFAULT_DEGREE_COLUMN = 3
DEFAULT_DELIMITER = ","

USGS_ALL_DAY_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_day.geojson"
DEFAULT_FEED_TIMEOUT = 30.0
FEED_USER_AGENT = "setsmaps (+https://earthquake.usgs.gov/earthquakes/feed/)"
