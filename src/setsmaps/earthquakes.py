"""Fetch and summarize the USGS daily earthquake feed.

The feed is a GeoJSON ``FeatureCollection``; each feature carries a
``properties`` mapping with (among others) ``place`` and ``mag``. See
https://earthquake.usgs.gov/earthquakes/feed/v1.0/geojson.php for the format.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from setsmaps.constants import DEFAULT_FEED_TIMEOUT, FEED_USER_AGENT, USGS_ALL_DAY_URL
from setsmaps.models import EarthquakeEvent

logger = logging.getLogger(__name__)


class FeedError(RuntimeError):
    """Raised when the earthquake feed cannot be fetched or decoded."""


@dataclass
class FeedConfig:
    """Configuration for fetching the earthquake feed."""

    url: str = USGS_ALL_DAY_URL
    timeout: float = DEFAULT_FEED_TIMEOUT

    def __post_init__(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise ValueError("url must be an http(s) URL")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")


def fetch_feed(
    config: FeedConfig | None = None, *, session: requests.Session | None = None
) -> dict[str, Any]:
    """Download the feed and decode it as a JSON object.

    :param config: Feed URL and timeout.
    :param session: Optional session to issue the request with.
    :return: Decoded feed payload.
    :raises FeedError: On connection, HTTP, or decoding failures.
    """
    config = config or FeedConfig()
    get = session.get if session is not None else requests.get

    logger.debug("Fetching earthquake feed from %s", config.url)
    try:
        response = get(
            config.url,
            timeout=config.timeout,
            headers={"User-Agent": FEED_USER_AGENT},
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise FeedError(f"Failed to fetch earthquake feed: {exc}") from exc

    try:
        payload = response.json()
    except requests.exceptions.JSONDecodeError as exc:
        raise FeedError(f"Earthquake feed is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise FeedError("Earthquake feed must be a JSON object")
    return payload


def _as_magnitude(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def parse_feed(payload: dict[str, Any]) -> list[EarthquakeEvent]:
    """Extract events that have both a place and a magnitude.

    :param payload: Decoded ``FeatureCollection``.
    :return: Events in feed order.
    """
    events: list[EarthquakeEvent] = []
    skipped = 0

    features = payload.get("features")
    if not isinstance(features, list):
        if features is not None:
            logger.debug("Ignoring non-list features value of type %s", type(features).__name__)
        return events

    for feature in features:
        properties = feature.get("properties") if isinstance(feature, dict) else None
        if not isinstance(properties, dict):
            skipped += 1
            continue
        place = properties.get("place")
        magnitude = _as_magnitude(properties.get("mag"))
        if not isinstance(place, str) or not place.strip() or magnitude is None:
            skipped += 1
            continue
        events.append(EarthquakeEvent(place=place, magnitude=magnitude))

    if skipped:
        logger.debug("Skipped %d features missing place or magnitude", skipped)
    return events


def earthquake_daily_summary(
    config: FeedConfig | None = None, *, session: requests.Session | None = None
) -> list[str]:
    """Return ``"<place> - Mag <mag>"`` lines for today's earthquakes.

    :param config: Feed URL and timeout.
    :param session: Optional session to issue the request with.
    :return: Summary lines in feed order.
    :raises FeedError: When the feed cannot be fetched or decoded.
    """
    events = parse_feed(fetch_feed(config, session=session))
    logger.info("Loaded %d earthquake events", len(events))
    return [event.summary for event in events]
