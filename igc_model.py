#!/usr/bin/env python3
"""
Data models for IGC to KML converter
"""

from dataclasses import dataclass
from typing import Optional

from igc_constants import EXTENSION_STAT_TEMPLATE


@dataclass(frozen=True)
class DeviceInfo:
    """Flight recorder identity taken from the A record"""
    manufacturer: str
    identifier: str = ''
    name: Optional[str] = None


@dataclass(frozen=True)
class DateInfo:
    """Flight date from the HFDTE record, kept as the two-digit fields of the file"""
    day: str
    month: str
    year: str


@dataclass(frozen=True)
class HeaderEntry:
    """A header record: three-letter subtype code and its free-text value"""
    code: str
    value: str = ''


@dataclass(frozen=True)
class ExtensionEntry:
    """A manufacturer-specific L record"""
    source: str
    text: str = ''


@dataclass(frozen=True)
class FixRecord:
    """
    A single B record. Coordinates are kept in their raw degree/minute
    encoding (DDMMmmm / DDDMMmmm) together with the hemisphere tag.
    """
    hour: int
    minute: int
    second: int
    latitude: str
    latitude_hemisphere: str
    longitude: str
    longitude_hemisphere: str
    pressure_altitude: float = 0.0
    gps_altitude: float = 0.0
    validity: str = 'A'


@dataclass(frozen=True)
class ExtensionStat:
    """How one manufacturer extension key is labelled and formatted"""
    label: str
    unit: str
    template: str = EXTENSION_STAT_TEMPLATE

    def format(self, value: str) -> str:
        return self.template.format(value=value, unit=self.unit)


@dataclass(frozen=True)
class CompiledDocument:
    """Result of one compile call"""
    name: str
    html: str
    snippet: str
    kml: str
