#!/usr/bin/env python3
"""
Flight summary functions for IGC to KML converter

Builds the HTML fragment shown in the placemark balloon, the manufacturer
statistics found in L records and the one-line snippet text.
"""

import re
from typing import Dict, Iterable, List, Optional, Tuple

from lxml import etree

from igc_model import DeviceInfo, DateInfo, HeaderEntry, ExtensionEntry, ExtensionStat
from igc_utils import formatFlightDate
from igc_constants import (
    EXTENSION_STATISTICS,
    EXTENSION_STAT_PATTERN,
    IGC_HEADER_LABELS,
    IGC_HEADER_SITE,
    HTML_CONTAINER_STYLE,
    HTML_LABEL_DEVICE,
    HTML_LABEL_DATE,
    SNIPPET_PREFIX
)

ExtensionTable = Dict[str, Dict[str, ExtensionStat]]

STAT_RE = re.compile(EXTENSION_STAT_PATTERN)


def defaultExtensionTable() -> ExtensionTable:
    """Build the manufacturer -> key -> ExtensionStat table from the built-in statistics"""
    return {
        manufacturer: {key: ExtensionStat(label, unit) for key, (label, unit) in stats.items()}
        for manufacturer, stats in EXTENSION_STATISTICS.items()
    }


def extensionStatistics(manufacturer: str,
                        extensions: Iterable[ExtensionEntry],
                        table: Optional[ExtensionTable] = None) -> List[List[Tuple[str, str]]]:
    """
    Scan L records for key:value statistics known for this manufacturer.

    Returns one list of (label, formatted value) pairs per extension entry
    that yielded at least one statistic, in record order.
    """
    if table is None:
        table = defaultExtensionTable()

    stats = table.get(manufacturer)
    if not stats:
        return []

    groups = []
    for entry in extensions:
        found = []
        for key, value in STAT_RE.findall(entry.text):
            stat = stats.get(key)
            if stat is not None:
                found.append((stat.label, stat.format(value)))
        if found:
            groups.append(found)

    return groups


def siteName(headers: Iterable[HeaderEntry]) -> Optional[str]:
    """First non-empty SIT header value"""
    for header in headers:
        if header.code == IGC_HEADER_SITE and header.value.strip():
            return header.value.strip()
    return None


def flightSnippet(headers: Iterable[HeaderEntry], date_info: DateInfo) -> str:
    """Generate the one-line summary, e.g. 'Flight from Lakeside on 12.07.23'"""
    site = siteName(headers)
    origin = f" from {site}" if site else ""
    return f"{SNIPPET_PREFIX}{origin} on {formatFlightDate(date_info)}"


class HtmlDescription:
    """
    Renders the balloon description of a flight as an indented HTML fragment.
    """

    def __init__(self, extension_table: Optional[ExtensionTable] = None):
        self.extension_table = extension_table if extension_table is not None else defaultExtensionTable()

    @staticmethod
    def _field(paragraph, label: str, value: str) -> None:
        etree.SubElement(paragraph, 'strong').text = f'{label}:'
        etree.SubElement(paragraph, 'dfn').text = value
        etree.SubElement(paragraph, 'br')

    def write_device(self, container, device: DeviceInfo) -> None:
        if device.name and device.name.strip():
            paragraph = etree.SubElement(container, 'p')
            self._field(paragraph, HTML_LABEL_DEVICE, device.name.strip())

    def write_headers(self, container, headers: Iterable[HeaderEntry], date_info: DateInfo) -> None:
        paragraph = etree.SubElement(container, 'p')
        for header in headers:
            label = IGC_HEADER_LABELS.get(header.code)
            value = header.value.strip()
            if label and value:
                self._field(paragraph, label, value)
        self._field(paragraph, HTML_LABEL_DATE, formatFlightDate(date_info))

    def write_statistics(self, container, manufacturer: str, extensions: Iterable[ExtensionEntry]) -> None:
        for group in extensionStatistics(manufacturer, extensions, self.extension_table):
            paragraph = etree.SubElement(container, 'p')
            for label, value in group:
                self._field(paragraph, label, value)

    def build(self,
              device: DeviceInfo,
              date_info: DateInfo,
              headers: Iterable[HeaderEntry],
              extensions: Iterable[ExtensionEntry]):
        """Build the <div> element holding the whole fragment"""
        container = etree.Element('div', style=HTML_CONTAINER_STYLE)
        self.write_device(container, device)
        self.write_headers(container, headers, date_info)
        self.write_statistics(container, device.manufacturer, extensions)
        return container

    def render(self,
               device: DeviceInfo,
               date_info: DateInfo,
               headers: Iterable[HeaderEntry],
               extensions: Iterable[ExtensionEntry]) -> str:
        """Render the complete fragment"""
        container = self.build(device, date_info, headers, extensions)
        return etree.tostring(container, pretty_print=True, encoding='unicode')
