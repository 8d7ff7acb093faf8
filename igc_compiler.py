#!/usr/bin/env python3
"""
KML compiler module for IGC to KML converter

Compiles the record groups of a parsed IGC file into a KML track document.
The compiler only reads from its record source and keeps the last
successfully compiled document.
"""

import logging
from typing import Optional

from igc_errors import StateError
from igc_model import CompiledDocument
from igc_summary import HtmlDescription, ExtensionTable, flightSnippet
from igc_utils import toCoordinates, fixTimestamp
from igc_writer import KmlWriter

# Configure logger
logger = logging.getLogger(__name__)


class KmlCompiler:
    """
    Compiles a KML document from a record source.

    The source must provide ready(), device_info(), date_info(),
    header_entries(), extension_entries() and fix_records(), as
    IgcRecordParser does.
    """

    def __init__(self, source, extension_table: Optional[ExtensionTable] = None):
        """Initialize with the record source to compile from"""
        self.source = source
        self.extension_table = extension_table
        self._document: Optional[CompiledDocument] = None

    def _assert_ready(self) -> None:
        if not self.source.ready():
            raise StateError("Parser not ready to compile")

    def compile(self, track_name: str, clamp: bool = False, extrude: bool = False,
                gps: bool = False) -> CompiledDocument:
        """
        Compile the KML document.

        Args:
            track_name: Name of the placemark
            clamp: Clamp the track to the ground instead of absolute altitude
            extrude: Extrude the track down to the ground
            gps: Use GPS altitude instead of pressure altitude

        Raises:
            StateError: If the record source is not ready
            FormatError: If a date or coordinate field is malformed
        """
        self._assert_ready()

        device = self.source.device_info()
        date_info = self.source.date_info()
        headers = self.source.header_entries()
        fixes = self.source.fix_records()

        html = HtmlDescription(self.extension_table).render(
            device, date_info, headers, self.source.extension_entries()
        )
        snippet = flightSnippet(headers, date_info)

        # Both lists are filled from the same fix in one pass
        times = []
        coordinates = []
        for fix in fixes:
            times.append(fixTimestamp(date_info, fix))
            longitude, latitude = toCoordinates(fix)
            altitude = fix.gps_altitude if gps else fix.pressure_altitude
            coordinates.append((longitude, latitude, float(altitude)))

        kml = KmlWriter().render(track_name, snippet, html, times, coordinates, clamp, extrude)

        document = CompiledDocument(name=track_name, html=html, snippet=snippet, kml=kml)
        self._document = document
        logger.debug(f"Compiled {len(fixes)} fixes into {len(document.kml)} characters of KML")
        return document

    def last_document(self) -> Optional[CompiledDocument]:
        """The last successfully compiled document, if any"""
        return self._document

    @property
    def kml(self) -> Optional[str]:
        """The last compiled KML string"""
        return self._document.kml if self._document else None
