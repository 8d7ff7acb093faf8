#!/usr/bin/env python3
"""
Constants for IGC to KML converter
"""

# Default configuration values
DEFAULT_ENCODING = "ISO-8859-1"
DEFAULT_OUT_PATH = None
DEFAULT_CLAMP = False
DEFAULT_EXTRUDE = False
DEFAULT_GPS = False
KML_EXTENSION = ".kml"

# IGC record types
IGC_RECORD_DEVICE = "A"
IGC_RECORD_HEADER = "H"
IGC_RECORD_EXTENSION = "L"
IGC_RECORD_POSITION = "B"

# IGC record patterns
IGC_PATTERN_DEVICE = r'^A(\w{3})(\w{3})(.*)$'
IGC_PATTERN_DATE = r'^HFDTE(?:DATE:)?(\d{2})(\d{2})(\d{2})'
IGC_PATTERN_HEADER = r'^H[FOP]([A-Z]{3})(?:[A-Z ]*:)?(.*)$'
IGC_PATTERN_EXTENSION = r'^L(\w{3})(.*)$'
IGC_PATTERN_POSITION = (
    r'^B(\d{2})(\d{2})(\d{2})'
    r'(\d{7})([NS])'
    r'(\d{8})([EW])'
    r'([AV])(-\d{4}|\d{5})(-\d{4}|\d{5})'
)

# Manufacturer extension statistics, e.g. "MC:3.5 MS:-1.2"
EXTENSION_STAT_PATTERN = r'(\w+):(-?\d+(?:\.\d+)?)'

# IGC header codes and the labels they are rendered with
IGC_HEADER_DATE = "DTE"
IGC_HEADER_SITE = "SIT"
IGC_HEADER_LABELS = {
    "PLT": "Pilot",
    "CID": "Competition ID",
    "GTY": "Glider",
    "GID": "Glider ID",
    "CCL": "Competition class",
    IGC_HEADER_SITE: "Site",
}

# Built-in manufacturer dispatch table: code -> key -> (label, unit)
EXTENSION_STATISTICS = {
    "XSX": {
        "MC": ("Max. climb", "m/s"),
        "MS": ("Max. sink", "m/s"),
        "MSP": ("Max. speed", "km/h"),
        "Dist": ("Track distance", "km"),
    },
}
EXTENSION_STAT_TEMPLATE = "{value} {unit}"

# Geographic conversion
COORDINATE_SCALE = 100000
MINUTES_PER_DEGREE = 60
NEGATIVE_HEMISPHERES = ("S", "W")
VALID_HEMISPHERES = ("N", "S", "E", "W")
CENTURY_OFFSET = 2000

# HTML description
HTML_CONTAINER_STYLE = "width: 250;"
HTML_LABEL_DEVICE = "Device"
HTML_LABEL_DATE = "Date"
FLIGHT_DATE_SEPARATOR = "."

# KML document
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"
KML_GX_NAMESPACE = "http://www.google.com/kml/ext/2.2"
KML_SNIPPET_MAX_LINES = "2"
KML_ICON_HREF = "http://earth.google.com/images/kml-icons/track-directional/track-0.png"
KML_LINE_COLOR = "99ffac59"
KML_LINE_WIDTH = "4"
KML_ALTITUDE_CLAMPED = "clampToGround"
KML_ALTITUDE_ABSOLUTE = "absolute"
KML_EXTRUDE_ON = "1"
KML_EXTRUDE_OFF = "0"

# Snippet text
SNIPPET_PREFIX = "Flight"

# Configuration sections
CONFIG_SECTION_DEFAULTS = "Defaults"
CONFIG_SECTION_EXTENSIONS = "Extensions"
CONFIG_FILE_NAMES = ("igc2kml.conf", "igc2kml.ini")
