#!/usr/bin/env python3
"""
IGC file parser module for IGC to KML converter

This module splits the lines of an IGC file into typed record groups:
the device (A) record, the flight date, the remaining header (H) records,
manufacturer extension (L) records and position fixes (B records).
The resulting IgcRecordParser is the record source the compiler reads from.
"""

import re
import logging
from typing import Iterable, List, Optional, TextIO, Tuple

from igc_errors import FileFormatError
from igc_model import DeviceInfo, DateInfo, HeaderEntry, ExtensionEntry, FixRecord
from igc_constants import (
    IGC_RECORD_DEVICE,
    IGC_RECORD_HEADER,
    IGC_RECORD_EXTENSION,
    IGC_RECORD_POSITION,
    IGC_PATTERN_DEVICE,
    IGC_PATTERN_DATE,
    IGC_PATTERN_HEADER,
    IGC_PATTERN_EXTENSION,
    IGC_PATTERN_POSITION,
    IGC_HEADER_DATE
)

# Configure logger
logger = logging.getLogger(__name__)


class IgcHeaderParser:
    """
    Parses A and H records.
    """

    DEVICE_RE = re.compile(IGC_PATTERN_DEVICE)
    DATE_RE = re.compile(IGC_PATTERN_DATE)
    HEADER_RE = re.compile(IGC_PATTERN_HEADER)

    def parse_device_line(self, line: str) -> Optional[DeviceInfo]:
        """Parse the A record, e.g. 'AXSXABC XCSoar Vario'"""
        match = self.DEVICE_RE.match(line)
        if not match:
            return None

        name = match.group(3).strip()
        return DeviceInfo(
            manufacturer=match.group(1),
            identifier=match.group(2),
            name=name or None
        )

    def parse_date_line(self, line: str) -> Optional[DateInfo]:
        """Parse HFDTEDDMMYY and HFDTEDATE:DDMMYY date records"""
        match = self.DATE_RE.match(line)
        if not match:
            return None

        day, month, year = match.groups()
        return DateInfo(day=day, month=month, year=year)

    def parse_header_line(self, line: str) -> Optional[HeaderEntry]:
        """Parse an H record into its subtype code and value"""
        match = self.HEADER_RE.match(line)
        if not match:
            return None

        code = match.group(1)
        if code == IGC_HEADER_DATE:
            return None

        return HeaderEntry(code=code, value=match.group(2))


class IgcPositionParser:
    """
    Parses position records (B records) from IGC files.
    """

    POSITION_RE = re.compile(IGC_PATTERN_POSITION)

    def parse_position_record(self, line: str) -> Optional[FixRecord]:
        """Parse a B record. Returns None when the fixed columns do not match"""
        match = self.POSITION_RE.match(line)
        if not match:
            return None

        (hour, minute, second, lat, lat_dir, lon, lon_dir,
         validity, alt_pressure, alt_gps) = match.groups()

        return FixRecord(
            hour=int(hour),
            minute=int(minute),
            second=int(second),
            latitude=lat,
            latitude_hemisphere=lat_dir,
            longitude=lon,
            longitude_hemisphere=lon_dir,
            pressure_altitude=float(alt_pressure),
            gps_altitude=float(alt_gps),
            validity=validity
        )


class IgcExtensionParser:
    """
    Parses manufacturer-specific L records.
    """

    EXTENSION_RE = re.compile(IGC_PATTERN_EXTENSION)

    def parse_extension_line(self, line: str) -> Optional[ExtensionEntry]:
        match = self.EXTENSION_RE.match(line)
        if not match:
            return None
        return ExtensionEntry(source=match.group(1), text=match.group(2))


class IgcRecordParser:
    """
    Main parser class for IGC files. Collects the record groups of one file
    and reports whether they are complete enough to compile.
    """

    def __init__(self):
        """Initialize an empty, not ready parser"""
        self.header_parser = IgcHeaderParser()
        self.position_parser = IgcPositionParser()
        self.extension_parser = IgcExtensionParser()
        self._reset()

    def _reset(self) -> None:
        self._ready = False
        self._device: Optional[DeviceInfo] = None
        self._date: Optional[DateInfo] = None
        self._headers: List[HeaderEntry] = []
        self._extensions: List[ExtensionEntry] = []
        self._fixes: List[FixRecord] = []

    def parse(self, lines: Iterable[str]) -> None:
        """
        Parse the lines of an IGC file.

        Raises FileFormatError if the device record, the date record or
        all position records are missing. The parser is not ready afterwards.
        """
        self._reset()
        skipped = 0

        for line in lines:
            if isinstance(line, bytes):
                line = line.decode('utf-8', errors='ignore')
            line = line.strip()
            if not line:
                continue

            record_type = line[0]

            if record_type == IGC_RECORD_POSITION:
                fix = self.position_parser.parse_position_record(line)
                if fix is None:
                    skipped += 1
                    logger.debug(f"Skipping malformed B record: {line}")
                    continue
                self._fixes.append(fix)

            elif record_type == IGC_RECORD_HEADER:
                date_info = self.header_parser.parse_date_line(line)
                if date_info is not None:
                    self._date = date_info
                    continue
                entry = self.header_parser.parse_header_line(line)
                if entry is not None:
                    self._headers.append(entry)

            elif record_type == IGC_RECORD_EXTENSION:
                entry = self.extension_parser.parse_extension_line(line)
                if entry is not None:
                    self._extensions.append(entry)

            elif record_type == IGC_RECORD_DEVICE and self._device is None:
                self._device = self.header_parser.parse_device_line(line)

        if self._device is None:
            raise FileFormatError("Invalid file format: missing A record")
        if self._date is None:
            raise FileFormatError("Invalid file format: missing date record")
        if not self._fixes:
            raise FileFormatError("Invalid file format: no B records")

        if skipped:
            logger.warning(f"Skipped {skipped} malformed B records")
        logger.info(
            f"Parsed {len(self._fixes)} fixes, {len(self._headers)} headers "
            f"and {len(self._extensions)} extension records "
            f"from {self._device.manufacturer} recorder"
        )
        self._ready = True

    def ready(self) -> bool:
        """True once a complete file has been parsed"""
        return self._ready

    def device_info(self) -> Optional[DeviceInfo]:
        return self._device

    def date_info(self) -> Optional[DateInfo]:
        return self._date

    def header_entries(self) -> Tuple[HeaderEntry, ...]:
        return tuple(self._headers)

    def extension_entries(self) -> Tuple[ExtensionEntry, ...]:
        return tuple(self._extensions)

    def fix_records(self) -> Tuple[FixRecord, ...]:
        return tuple(self._fixes)


# Public function

def parseIgcFile(track_file: TextIO) -> IgcRecordParser:
    """
    Parse an IGC file into an IgcRecordParser.
    Main entry point for IGC parsing.
    """
    parser = IgcRecordParser()
    parser.parse(track_file.readlines())
    return parser
