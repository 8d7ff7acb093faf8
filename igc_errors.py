#!/usr/bin/env python3
"""
Exceptions raised by the IGC to KML converter
"""


class Igc2KmlError(Exception):
    """Base class for all converter errors"""


class FormatError(Igc2KmlError):
    """A field holds malformed content, e.g. text where a number is expected"""


class FileFormatError(FormatError):
    """The input is not a usable IGC file"""


class StateError(Igc2KmlError):
    """An operation was called out of the required parse/compile/export order"""


class FileReadError(Igc2KmlError):
    """The input file could not be read"""


class FileWriteError(Igc2KmlError):
    """The output file could not be written"""
