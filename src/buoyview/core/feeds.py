"""
Feed registry — which URL to fetch, how to parse it, and what to call the columns.

Usage::

    from buoyview.core.feeds import STATIONS, load_rows

    rows = load_rows(STATIONS, load_config())
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import httpx
import structlog

from buoyview.core.config import BuoyViewConfig
from buoyview.core.fetch import fetch_text
from buoyview.core.parse import parse_observations, parse_stations
from buoyview.core.table import Row

logger = structlog.get_logger()


@dataclass(frozen=True)
class Feed:
    name: str
    title: str
    columns: tuple[str, ...]
    parse: Callable[[str], list[Row]]
    url_setting: str  # BuoyViewConfig attribute holding the URL

    def url(self, config: BuoyViewConfig) -> str:
        return str(getattr(config, self.url_setting))


STATIONS = Feed(
    name="stations",
    title="Active Stations",
    columns=(
        "station",
        "name",
        "lat",
        "lon",
        "program",
        "kind",
        "met",
        "currents",
        "water quality",
        "dart",
    ),
    parse=parse_stations,
    url_setting="stations_url",
)

OBSERVATIONS = Feed(
    name="observations",
    title="Latest Observations",
    columns=(
        "stn", "lat", "lon", "year", "mo", "day", "hr", "min", "wdir", "wspd", "gst",
        "wvht", "dpd", "apd", "mwd", "pres", "ptdy", "atmp", "wtmp", "dewp", "vis", "tide",
    ),
    parse=parse_observations,
    url_setting="observations_url",
)

FEEDS: dict[str, Feed] = {f.name: f for f in (STATIONS, OBSERVATIONS)}


def get_feed(name: str) -> Feed:
    """Look up a feed by name.  Raises KeyError for unknown names."""
    return FEEDS[name]


def load_rows(
    feed: Feed,
    config: BuoyViewConfig,
    client: httpx.Client | None = None,
) -> list[Row]:
    """Fetch and parse one feed.  FetchError / ParseError propagate unchanged."""
    body = fetch_text(feed.url(config), timeout=config.timeout_seconds, client=client)
    rows = feed.parse(body)
    logger.info("feed_loaded", feed=feed.name, rows=len(rows))
    return rows


__all__ = ["FEEDS", "Feed", "OBSERVATIONS", "STATIONS", "get_feed", "load_rows"]
