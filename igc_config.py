#!/usr/bin/env python3
"""
Configuration handling for IGC to KML converter

This module provides configuration management for the IGC to KML converter.
It handles command line arguments, config file loading and the
manufacturer extension statistics that can be added per vendor.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from igc_model import ExtensionStat
from igc_summary import ExtensionTable, defaultExtensionTable
from igc_utils import booleanFromString
from igc_constants import (
    DEFAULT_ENCODING,
    DEFAULT_OUT_PATH,
    DEFAULT_CLAMP,
    DEFAULT_EXTRUDE,
    DEFAULT_GPS,
    CONFIG_SECTION_DEFAULTS,
    CONFIG_SECTION_EXTENSIONS,
    CONFIG_FILE_NAMES
)

# Configure logger
logger = logging.getLogger(__name__)


class ConfigParser:
    """
    Handles parsing of configuration files.
    Separates the parsing logic from the configuration storage.
    """

    def __init__(self):
        """Initialize the config parser"""
        # Keep key case, extension keys such as 'Dist' are case sensitive
        self.parser = configparser.RawConfigParser()
        self.parser.optionxform = str

    def find_config_file(self, cli_path: Optional[str] = None) -> Optional[str]:
        """Find a configuration file to use"""
        if cli_path and os.path.isfile(cli_path):
            logger.info(f"Using configuration file: {cli_path}")
            return cli_path

        if cli_path:
            logger.warning(f"Configuration file not found: {cli_path}")

        # Look in standard locations
        paths = ('.', os.path.dirname(os.path.abspath(__file__)))

        for path in paths:
            for file in CONFIG_FILE_NAMES:
                full_path = os.path.join(path, file)
                if Path(full_path).is_file():
                    logger.info(f"Found configuration file: {full_path}")
                    return full_path

        logger.debug("No configuration file found, using defaults")
        return None

    def load_config_file(self, file_path: Optional[str] = None) -> bool:
        """Load configuration from file"""
        config_file = self.find_config_file(file_path)
        if not config_file:
            return False

        try:
            self.parser.read(config_file)
            return True
        except configparser.Error as e:
            logger.error(f"Error reading config file: {e}")
            return False

    def get_default_settings(self) -> Dict[str, str]:
        """Get default settings from configuration, with lower-case keys"""
        if CONFIG_SECTION_DEFAULTS not in self.parser:
            return {}
        return {key.lower(): value for key, value in self.parser[CONFIG_SECTION_DEFAULTS].items()}

    @staticmethod
    def parse_stat_config(key: str, val: str) -> ExtensionStat:
        """Parse an extension statistic line: '<label>, <unit>'"""
        parts = [part.strip() for part in val.split(',', 1)]
        if len(parts) != 2 or not parts[0]:
            raise ValueError(f"Invalid extension statistic for {key} (expected 'label, unit'): {val}")
        return ExtensionStat(label=parts[0], unit=parts[1])

    def get_extension_settings(self) -> ExtensionTable:
        """Extract [Extensions <MFR>] sections"""
        table: ExtensionTable = {}

        for section_name in self.parser.sections():
            words = section_name.split()
            if len(words) != 2 or words[0].lower() != CONFIG_SECTION_EXTENSIONS.lower():
                continue

            manufacturer = words[1].upper()
            stats = table.setdefault(manufacturer, {})
            for key, val in self.parser[section_name].items():
                try:
                    stats[key] = self.parse_stat_config(key, val)
                except ValueError as e:
                    logger.warning(f"Invalid statistic in section {section_name}: {e}")

        return table


class Config:
    """Main configuration class for IGC to KML converter"""

    def __init__(self, cli_args):
        """Initialize with command line arguments"""
        self.parser = ConfigParser()
        self.cli_args = cli_args

        # Initialize defaults
        self.encoding = DEFAULT_ENCODING
        self.out_path = DEFAULT_OUT_PATH
        self.clamp = DEFAULT_CLAMP
        self.extrude = DEFAULT_EXTRUDE
        self.gps = DEFAULT_GPS
        self.extension_settings: ExtensionTable = {}

        # Load configuration
        self._load_config()

    def _cli(self, name: str) -> Any:
        return getattr(self.cli_args, name, None)

    def _flag(self, name: str, defaults: Dict[str, str], current: bool) -> bool:
        """CLI flag if given, then config file value, then the current default"""
        if self._cli(name):
            return True
        if name in defaults:
            try:
                return booleanFromString(defaults[name])
            except ValueError as e:
                logger.warning(f"Ignoring {name} setting: {e}")
        return current

    def _load_config(self):
        """Load and process configuration"""
        # Load config file
        self.parser.load_config_file(self._cli('config'))

        # Get default settings
        defaults = self.parser.get_default_settings()

        # Apply CLI arguments (override config file)
        if self._cli('encoding'):
            self.encoding = self._cli('encoding')
        elif 'encoding' in defaults:
            self.encoding = defaults['encoding']

        if self._cli('destination'):
            self.out_path = self._cli('destination')
        elif defaults.get('outpath'):
            self.out_path = defaults['outpath']

        self.clamp = self._flag('clamp', defaults, self.clamp)
        self.extrude = self._flag('extrude', defaults, self.extrude)
        self.gps = self._flag('gps', defaults, self.gps)

        # Load manufacturer statistics
        self.extension_settings = self.parser.get_extension_settings()

    @property
    def outPath(self) -> Optional[str]:
        """Get output path"""
        return self.out_path

    def extension_table(self) -> ExtensionTable:
        """Built-in manufacturer statistics merged with the configured ones"""
        table = defaultExtensionTable()
        for manufacturer, stats in self.extension_settings.items():
            table.setdefault(manufacturer, {}).update(stats)
        return table

    def manufacturers(self) -> List[str]:
        """Manufacturer codes with known extension statistics"""
        return sorted(self.extension_table())
