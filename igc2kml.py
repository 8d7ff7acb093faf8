#!/usr/bin/env python3
"""
IGC to KML Converter

This script converts IGC flight logs to KML track documents for Google Earth.

Usage:
    python igc2kml.py [-c config] [-d destination] [-e encoding] [--clamp] [--extrude] [--gps] file.igc [file2.igc ...]
"""

import argparse
import logging
import sys
from typing import List, Optional

from igc_config import Config
from igc_converter import Converter
from igc_errors import Igc2KmlError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger('igc2kml')


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert IGC flight logs into KML track documents',
        epilog='Example: python igc2kml.py --extrude --gps -d out/ flight.igc'
    )

    parser.add_argument('-c', '--config', default=None, help='Path to config file')
    parser.add_argument('-d', '--destination', default=None, help='Directory to write the KML files to (default: next to the IGC file)')
    parser.add_argument('-e', '--encoding', default=None, help='Encoding of the IGC files (default: ISO-8859-1)')
    parser.add_argument('--clamp', action='store_true', help='Clamp the track to the ground')
    parser.add_argument('--extrude', action='store_true', help='Extrude the track to the ground')
    parser.add_argument('--gps', action='store_true', help='Use GPS altitude instead of pressure altitude')
    parser.add_argument('-s', '--stdout', action='store_true', help='Write the KML documents to standard output')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('trackfile', nargs='+', help='Path to one or more IGC files')
    return parser


def process_file(config: Config, inPath: str, stdout: bool = False) -> bool:
    """Convert one IGC file. Returns True on success"""
    logger.info(f"Processing {inPath}...")
    converter = Converter(config.extension_table())

    try:
        converter.parse(inPath, config.encoding)
        converter.compile(config.clamp, config.extrude, config.gps)
        if stdout:
            sys.stdout.write(converter.kml)
        else:
            converter.export(config.outPath)
    except Igc2KmlError as e:
        logger.error(f"Error processing {inPath}: {e}")
        return False

    return True


def process_files(config: Config, paths: List[str], stdout: bool = False) -> int:
    """Convert several IGC files. Returns the number of failures"""
    failures = 0
    for inPath in paths:
        if not process_file(config, inPath, stdout):
            failures += 1
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Set log level based on verbose flag
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(args)
    logger.debug(f"Extension statistics known for: {', '.join(config.manufacturers())}")

    failures = process_files(config, args.trackfile, args.stdout)
    logger.info("Processing complete.")
    return 1 if failures else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logger.critical(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)
