#!/usr/bin/env python3
"""
Converter module for IGC to KML converter

Sequences the three steps of a conversion: parse an IGC file, compile the
KML document and export it next to the input file or into a directory.
"""

import errno
import logging
from pathlib import Path
from typing import Optional, Union

from igc_compiler import KmlCompiler
from igc_errors import FileReadError, FileWriteError, StateError
from igc_model import CompiledDocument
from igc_parser import IgcRecordParser
from igc_summary import ExtensionTable
from igc_constants import DEFAULT_ENCODING, KML_EXTENSION

# Configure logger
logger = logging.getLogger(__name__)


class Converter:
    """
    Converts IGC files to KML.

    Example:
        converter = Converter()
        converter.parse('path/to/file.igc')
        converter.compile()
        converter.export('output/dir')
    """

    def __init__(self, extension_table: Optional[ExtensionTable] = None):
        self.parser = IgcRecordParser()
        self.compiler = KmlCompiler(self.parser, extension_table)
        self.path: Optional[Path] = None
        self._compiled_path: Optional[Path] = None

    def parse(self, file: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> None:
        """
        Load and parse an IGC file.

        Raises:
            FileReadError: If the file could not be loaded
            FileFormatError: If the file format is invalid
        """
        path = Path(file)
        logger.info(f"Reading {path}")

        try:
            with open(path, 'r', encoding=encoding) as track_file:
                lines = track_file.readlines()
        except FileNotFoundError:
            raise FileReadError(f"Input file does not exist: {path}") from None
        except IsADirectoryError:
            raise FileReadError(f"Input file is a directory: {path}") from None
        except PermissionError:
            raise FileReadError(f"Input file is not readable: {path}") from None
        except (LookupError, UnicodeDecodeError) as e:
            raise FileReadError(f"Cannot decode {path} as {encoding}: {e}") from e

        self.parser.parse(lines)
        self.path = path
        self._compiled_path = None

    def compile(self, clamp: bool = False, extrude: bool = False, gps: bool = False) -> CompiledDocument:
        """
        Compile the KML document from the parsed IGC file.

        Raises:
            StateError: If parse was not called before
        """
        if not self.parser.ready():
            raise StateError("Cannot compile without preceding parse")

        document = self.compiler.compile(self.path.stem, clamp, extrude, gps)
        self._compiled_path = self.path
        return document

    def destination(self, directory: Optional[Union[str, Path]] = None) -> Path:
        """Output path: <directory or input directory>/<input stem>.kml"""
        if self.path is None:
            raise StateError("Cannot resolve a destination before parse was called")
        base = Path(directory) if directory else self.path.parent
        return base / (self.path.stem + KML_EXTENSION)

    def export(self, directory: Optional[Union[str, Path]] = None) -> Path:
        """
        Export the compiled KML document.

        If no directory is given, the file is written next to the IGC input file.

        Raises:
            StateError: If compile was not called before for the parsed file
            FileWriteError: If the directory is missing, not a directory or write protected
        """
        document = self.compiler.last_document()
        if document is None or self._compiled_path != self.path:
            raise StateError("Cannot export before compile was called")

        dest = self.destination(directory)
        shown = directory if directory else dest.parent

        try:
            with open(dest, 'w', encoding='utf-8') as kml_file:
                kml_file.write(document.kml)
        except PermissionError:
            raise FileWriteError(f"Destination is write-protected: {shown}") from None
        except NotADirectoryError:
            raise FileWriteError(f"Destination is not a directory: {shown}") from None
        except FileNotFoundError:
            raise FileWriteError(f"Destination does not exist: {shown}") from None
        except OSError as e:
            if e.errno == errno.EROFS:
                raise FileWriteError(f"Destination is write-protected: {shown}") from e
            raise FileWriteError(f"Cannot write {dest}: {e.strerror}") from e

        logger.info(f"Successfully generated: {dest}")
        return dest

    @property
    def kml(self) -> Optional[str]:
        """The compiled KML document"""
        return self.compiler.kml
