"""
Feed parsers — raw response text to rows of strings.

Two formats:

  latest_obs.txt (plaintext)
    Two ``#`` header lines, then one whitespace-separated record per line.

  activestations.xml
    ``<stations>`` root with one ``<station .../>`` element per station; all
    data lives in attributes.

Rows are plain ``list[str]``; no field is converted to a number.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

import structlog

from buoyview.core.exceptions import ParseError
from buoyview.core.table import Row

logger = structlog.get_logger()

COMMENT_MARKER = "#"
STATION_TAG = "station"

# Fallback for the descriptive attributes; the capability flags fall back to "n".
UNKNOWN = "unknown"
FLAG_ABSENT = "n"


# ---------------------------------------------------------------------------
# Plaintext observations
# ---------------------------------------------------------------------------


def parse_observations(body: str) -> list[Row]:
    """Split the plaintext feed into rows, skipping comment and blank lines."""
    rows: list[Row] = []
    for line in body.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_MARKER):
            continue
        rows.append(stripped.split())
    logger.debug("observations_parsed", rows=len(rows))
    return rows


# ---------------------------------------------------------------------------
# XML active stations
# ---------------------------------------------------------------------------


@dataclass
class ActiveStation:
    """One ``<station>`` element of the active-stations feed."""

    id: str
    name: str
    lat: str
    lon: str
    program: str
    kind: str
    met: str
    currents: str
    water_quality: str
    dart: str

    @classmethod
    def from_element(cls, element: ET.Element) -> ActiveStation:
        attrs = element.attrib

        def required(key: str) -> str:
            try:
                return attrs[key]
            except KeyError:
                station = attrs.get("id", "?")
                raise ParseError(
                    f"station {station!r} is missing required attribute {key!r}"
                ) from None

        return cls(
            id=attrs.get("id", UNKNOWN),
            name=attrs.get("name", UNKNOWN),
            lat=required("lat"),
            lon=required("lon"),
            program=attrs.get("pgm", UNKNOWN),
            kind=attrs.get("type", UNKNOWN),
            met=attrs.get("met", FLAG_ABSENT),
            currents=attrs.get("currents", FLAG_ABSENT),
            water_quality=attrs.get("waterquality", FLAG_ABSENT),
            dart=attrs.get("dart", FLAG_ABSENT),
        )

    def to_row(self) -> Row:
        return [
            self.id,
            self.name,
            self.lat,
            self.lon,
            self.program,
            self.kind,
            self.met,
            self.currents,
            self.water_quality,
            self.dart,
        ]


def parse_station_elements(body: str) -> list[ActiveStation]:
    """Parse the XML feed into ``ActiveStation`` records, in document order."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise ParseError(f"malformed stations XML: {exc}") from exc
    return [ActiveStation.from_element(el) for el in root.iter(STATION_TAG)]


def parse_stations(body: str) -> list[Row]:
    stations = parse_station_elements(body)
    logger.debug("stations_parsed", rows=len(stations))
    return [s.to_row() for s in stations]


__all__ = [
    "ActiveStation",
    "COMMENT_MARKER",
    "FLAG_ABSENT",
    "STATION_TAG",
    "UNKNOWN",
    "parse_observations",
    "parse_station_elements",
    "parse_stations",
]
