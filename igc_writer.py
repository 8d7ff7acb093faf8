#!/usr/bin/env python3
"""
KML file writer module for IGC to KML converter

This module builds a KML document with a single placemark holding a
gx:Track. The track is encoded the way KML requires: a list of <when>
elements followed by a list of <gx:coord> elements of the same length.
"""

from datetime import datetime
from typing import Sequence, Tuple

from lxml import etree

from igc_constants import (
    KML_NAMESPACE,
    KML_GX_NAMESPACE,
    KML_SNIPPET_MAX_LINES,
    KML_ICON_HREF,
    KML_LINE_COLOR,
    KML_LINE_WIDTH,
    KML_ALTITUDE_CLAMPED,
    KML_ALTITUDE_ABSOLUTE,
    KML_EXTRUDE_ON,
    KML_EXTRUDE_OFF
)

Coordinate = Tuple[float, float, float]

KML_NSMAP = {None: KML_NAMESPACE, 'gx': KML_GX_NAMESPACE}


def kmlTag(name: str) -> str:
    return f'{{{KML_NAMESPACE}}}{name}'


def gxTag(name: str) -> str:
    return f'{{{KML_GX_NAMESPACE}}}{name}'


class KmlWriter:
    """
    Builds and serializes KML track documents.
    """

    @staticmethod
    def format_description(text: str):
        """CDATA section for the description, escaped text if it cannot be held in one"""
        if ']]>' in text:
            return text
        return etree.CDATA(text)

    @staticmethod
    def format_timestamp(timestamp: datetime) -> str:
        """Full date-time with second precision"""
        return timestamp.isoformat(timespec='seconds')

    @staticmethod
    def format_coordinate(coordinate: Coordinate) -> str:
        """Longitude, latitude and altitude separated by spaces"""
        return ' '.join(str(value) for value in coordinate)

    @staticmethod
    def _element(parent, tag: str, text: str):
        element = etree.SubElement(parent, tag)
        element.text = text
        return element

    def build_style(self, placemark) -> None:
        """Append the fixed icon and line style"""
        style = etree.SubElement(placemark, kmlTag('Style'))
        icon = etree.SubElement(etree.SubElement(style, kmlTag('IconStyle')), kmlTag('Icon'))
        self._element(icon, kmlTag('href'), KML_ICON_HREF)
        line_style = etree.SubElement(style, kmlTag('LineStyle'))
        self._element(line_style, kmlTag('color'), KML_LINE_COLOR)
        self._element(line_style, kmlTag('width'), KML_LINE_WIDTH)

    def build_track(self,
                    placemark,
                    times: Sequence[datetime],
                    coordinates: Sequence[Coordinate],
                    clamp: bool = False,
                    extrude: bool = False):
        """Append the gx:Track element with its parallel time and coordinate lists"""
        if len(times) != len(coordinates):
            raise ValueError(
                f"Track needs one timestamp per coordinate, got {len(times)} and {len(coordinates)}"
            )

        track = etree.SubElement(placemark, gxTag('Track'))
        self._element(track, kmlTag('altitudeMode'), KML_ALTITUDE_CLAMPED if clamp else KML_ALTITUDE_ABSOLUTE)
        self._element(track, kmlTag('extrude'), KML_EXTRUDE_ON if extrude else KML_EXTRUDE_OFF)
        for timestamp in times:
            self._element(track, kmlTag('when'), self.format_timestamp(timestamp))
        for coordinate in coordinates:
            self._element(track, gxTag('coord'), self.format_coordinate(coordinate))
        return track

    def build_document(self,
                       name: str,
                       snippet: str,
                       description: str,
                       times: Sequence[datetime],
                       coordinates: Sequence[Coordinate],
                       clamp: bool = False,
                       extrude: bool = False):
        """Build the <kml> root element of a complete document"""
        root = etree.Element(kmlTag('kml'), nsmap=KML_NSMAP)
        placemark = etree.SubElement(root, kmlTag('Placemark'))
        self._element(placemark, kmlTag('name'), name)
        snippet_element = self._element(placemark, kmlTag('Snippet'), snippet)
        snippet_element.set('maxLines', KML_SNIPPET_MAX_LINES)
        self._element(placemark, kmlTag('description'), self.format_description(description))
        self.build_style(placemark)
        self.build_track(placemark, times, coordinates, clamp, extrude)
        return root

    def render(self,
               name: str,
               snippet: str,
               description: str,
               times: Sequence[datetime],
               coordinates: Sequence[Coordinate],
               clamp: bool = False,
               extrude: bool = False) -> str:
        """Serialize a complete KML document, XML declaration included"""
        root = self.build_document(name, snippet, description, times, coordinates, clamp, extrude)
        return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding='UTF-8').decode('utf-8')
