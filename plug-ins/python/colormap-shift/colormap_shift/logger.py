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

"""Logging for the colormap shift plug-in."""

import os
import logging

LOGGER_NAME = "colormap_shift"
LOG_FORMAT  = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'


def gimp_message(msg):
    # Only reachable from a running plug-in, where the GI bindings exist.
    import gi
    gi.require_version('Gimp', '3.0')
    from gi.repository import Gimp
    Gimp.message(msg)


class ShiftLogger (object):
    def __init__(self, interactive, logfile=None, append=False, verbose=False,
                 debugging=False, messenger=gimp_message):
        self.interactive = interactive
        self.messenger = messenger

        self.verbose = verbose
        self.debugging = debugging
        self.enabled = False

        self.logger = logging.getLogger(LOGGER_NAME)
        if debugging:
            self.logger.setLevel(logging.DEBUG)
        else:
            self.logger.setLevel(logging.INFO)

        self.handler = None
        if logfile is None:
            return

        if append:
            log_filemode = 'a'
        else:
            log_filemode = 'w'

        try:
            self.handler = logging.FileHandler(logfile, mode=log_filemode,
                                               encoding='utf-8')
        except OSError:
            msg = ("We do not have permission to create a log file at " +
                   os.path.abspath(logfile) + ". " +
                   "Please use env var COLORMAP_SHIFT_LOG_FILE to set up a location.")
            self._show(msg)
            return

        self.handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(self.handler)
        self.enabled = True

        self.logger.debug("Starting logger...")
        self.logger.debug("Log file: %s", os.path.abspath(logfile))

    def close(self):
        if self.handler is not None:
            self.logger.removeHandler(self.handler)
            self.handler.close()
            self.handler = None
            self.enabled = False

    def _show(self, msg):
        print(msg)
        if self.interactive:
            self.messenger(msg)

    def set_interactive(self, interactive):
        if self.interactive != interactive:
            self.interactive = interactive
            self.logger.debug("Interactive set to %s", self.interactive)

    def message(self, msg):
        self.logger.info(msg)
        self._show(msg)

    def gimp_verbose_message(self, msg):
        if self.verbose and self.interactive:
            self.messenger(msg)

    def info(self, msg):
        if self.verbose:
            self.logger.info(msg)
            print(msg)

    def warning(self, msg):
        self.logger.warning(msg)
        self._show('WARNING: ' + msg)

    def error(self, msg):
        self.logger.error(msg)
        self._show('ERROR: ' + msg)

    def debug(self, msg):
        self.logger.debug(msg)
        if self.debugging:
            print(msg)
