#   This program is free software: you can redistribute it and/or modify
#   it under the terms of the GNU General Public License as published by
#   the Free Software Foundation; either version 3 of the License, or
#   (at your option) any later version.
#
#   This program is distributed in the hope that it will be useful,
#   but WITHOUT ANY WARRANTY; without even the implied warranty of
#   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#   GNU General Public License for more details.
#
#   You should have received a copy of the GNU General Public License
#   along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Configuration handling for the colormap shift plug-in."""

import configparser
import os

from .colormap import DEFAULT_OFFSET, DEFAULT_STRIDE
from .errors import ConfigError


class ShiftConfig(object):
    DEFAULT_CONFIG  = "colormap-shift.ini"
    MAIN_SECTION    = "main"

    def __init__(self, config_path=None, log_path=None):
        base_path = os.path.dirname(os.path.realpath(__file__))
        explicit = config_path is not None
        if config_path is None:
            config_path = os.getenv("COLORMAP_SHIFT_CONFIG_FILE")
            explicit = config_path is not None
        if config_path is None:
            config_path = os.path.join(base_path, self.DEFAULT_CONFIG)

        self.config_file = config_path
        self.stride = DEFAULT_STRIDE
        self.default_offset = DEFAULT_OFFSET
        self.legacy_reset = False
        self.verbose = False
        self.debugging = False

        # Values are paths and numbers, '%' has no special meaning in them.
        parser = configparser.ConfigParser(interpolation=None)
        if os.path.exists(config_path):
            try:
                parser.read(config_path, encoding='utf-8')
            except (configparser.Error, UnicodeDecodeError) as err:
                raise ConfigError(f"Config file '{config_path}' could not be parsed: {err}") from err
        elif explicit:
            raise ConfigError(f"Config file '{config_path}' does not exist!")

        if parser.has_section(self.MAIN_SECTION):
            self._load_main(parser[self.MAIN_SECTION])

        if log_path is None:
            log_path = os.getenv("COLORMAP_SHIFT_LOG_FILE")
        if log_path is None and parser.has_section(self.MAIN_SECTION):
            try:
                log_path = parser[self.MAIN_SECTION].get('log-file')
            except configparser.Error as err:
                raise ConfigError(f"Invalid log-file in '{config_path}': {err}") from err

        # None means no log file, messages still reach the console and GIMP.
        self.log_file = log_path

    def _load_main(self, section):
        try:
            self.stride = section.getint('stride', self.stride)
            self.default_offset = section.getint('default-offset', self.default_offset)
            self.legacy_reset = section.getboolean('legacy-reset', self.legacy_reset)
            self.verbose = section.getboolean('verbose', self.verbose)
            self.debugging = section.getboolean('debugging', self.debugging)
        except (ValueError, configparser.Error) as err:
            raise ConfigError(f"Invalid value in '{self.config_file}': {err}") from err

        if self.stride <= 0:
            raise ConfigError(f"stride must be positive, got {self.stride}")
        if not 0 <= self.default_offset <= 255:
            raise ConfigError(f"default-offset must be in 0..255, got {self.default_offset}")
