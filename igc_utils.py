#!/usr/bin/env python3
"""
Utility functions for IGC to KML converter

Field reconstruction for IGC records: degree/minute coordinates to decimal
degrees, and the flight date plus fix time to absolute timestamps.
"""

from datetime import datetime, timezone
from typing import Tuple, Union

from igc_errors import FormatError
from igc_model import DateInfo, FixRecord
from igc_constants import (
    COORDINATE_SCALE,
    MINUTES_PER_DEGREE,
    NEGATIVE_HEMISPHERES,
    VALID_HEMISPHERES,
    CENTURY_OFFSET,
    FLIGHT_DATE_SEPARATOR
)

_TRUE_STRINGS = ('1', 'yes', 'true', 'on')
_FALSE_STRINGS = ('0', 'no', 'false', 'off')


def toDecimal(raw: Union[str, int, float], hemisphere: str) -> float:
    """
    Convert an IGC degree/minute value (DDMMmmm or DDDMMmmm) to signed
    decimal degrees.

    The last five digits are minutes in thousandths, everything before them
    is whole degrees. South and west are negative.
    """
    if isinstance(raw, bool):
        raise FormatError(f"Invalid coordinate value: {raw!r}")

    if isinstance(raw, (int, float)):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise FormatError(f"Invalid coordinate value: {raw!r}") from None

    if value < 0:
        raise FormatError(f"Coordinate value must not be negative: {raw!r}")

    tag = str(hemisphere).strip().upper()
    if tag not in VALID_HEMISPHERES:
        raise FormatError(f"Invalid hemisphere tag: {hemisphere!r}")

    degrees = value // COORDINATE_SCALE
    minutes = value % COORDINATE_SCALE
    decimal = degrees + minutes / COORDINATE_SCALE / MINUTES_PER_DEGREE * 100

    if tag in NEGATIVE_HEMISPHERES:
        decimal = -decimal

    return decimal


def toCoordinates(fix: FixRecord) -> Tuple[float, float]:
    """Return (longitude, latitude) of a fix in decimal degrees"""
    longitude = toDecimal(fix.longitude, fix.longitude_hemisphere)
    latitude = toDecimal(fix.latitude, fix.latitude_hemisphere)
    return longitude, latitude


def formatFlightDate(date_info: DateInfo) -> str:
    """Render the flight date as DD.MM.YY, exactly as recorded"""
    return FLIGHT_DATE_SEPARATOR.join((date_info.day, date_info.month, date_info.year))


def fixTimestamp(date_info: DateInfo, fix: FixRecord) -> datetime:
    """
    Combine the flight date with the time of a fix.

    All fixes are assumed to lie on the date of the HFDTE record, a flight
    crossing midnight is not detected.
    """
    try:
        return datetime(
            CENTURY_OFFSET + int(date_info.year),
            int(date_info.month),
            int(date_info.day),
            int(fix.hour),
            int(fix.minute),
            int(fix.second),
            tzinfo=timezone.utc
        )
    except (TypeError, ValueError) as e:
        raise FormatError(f"Invalid fix timestamp: {e}") from e


def booleanFromString(value: Union[str, bool]) -> bool:
    """Convert a config file flag such as 'yes' or 'off' to a bool"""
    if isinstance(value, bool):
        return value

    lowered = value.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"Not a boolean: {value}")
