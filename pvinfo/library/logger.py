# PVINFO: Protected Virtualization Information Tool
# Copyright (c) 2026, PVINFO Team
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; Version 2.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#

"""
Logging functions
"""
import logging
import platform
import sys
import os
from typing import Optional
from enum import Enum

LOGGER_NAME = 'PVINFO_LOGGER'


class level(Enum):
    DEBUG = 10
    HELPER = 11
    HAL = 12
    VERBOSE = 13
    INFO = 20
    ERROR = 40


class pvinfoFilter(logging.Filter):
    def __init__(self, name: str = '') -> None:
        super().__init__(name)

    def filter(self, record):
        if record.levelno == level.ERROR.value:
            record.additional = 'ERROR: '
        elif record.levelno == level.DEBUG.value:
            record.additional = '[*] [DEBUG] '
        elif record.levelno == level.VERBOSE.value:
            record.additional = '[*] [VERBOSE] '
        elif record.levelno == level.HAL.value:
            record.additional = '[*] [HAL] '
        elif record.levelno == level.HELPER.value:
            record.additional = '[*] [HELPER] '
        else:
            record.additional = ''
        return True


class pvinfoStreamFormatter(logging.Formatter):
    try:
        is_atty = sys.stdout.isatty()
    except AttributeError:
        is_atty = False
    # Respect https://no-color.org/ convention, and disable colorization
    # when the output is not a terminal (eg. redirection to a file)
    if is_atty and os.getenv('NO_COLOR') is None and platform.system().lower() == 'linux':
        colors = {
            'GREY': '\033[90m',
            'RED': '\033[91m',
            'BLUE': '\033[94m',
            'END': '\033[0m'}
    else:
        colors = {}

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, style='%') -> None:
        super().__init__(fmt, datefmt, style)
        self.infmt = fmt

    def format(self, record):
        if record.levelno == level.DEBUG.value:
            color = 'BLUE'
        elif record.levelno in [level.VERBOSE.value, level.HAL.value, level.HELPER.value]:
            color = 'GREY'
        elif record.levelno == level.ERROR.value:
            color = 'RED'
        else:
            color = None
        if color in self.colors:
            log_fmt = f'{self.colors[color]}{self.infmt}{self.colors["END"]}'
        else:
            log_fmt = self.infmt
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


class Logger:
    """Class for logging to console and text file."""

    def __init__(self):
        """The Constructor."""
        self.logfile = None
        self.logstream = logging.StreamHandler(sys.stdout)
        self.pvinfoLogger = logging.getLogger(LOGGER_NAME)
        self.pvinfoLogger.setLevel(logging.INFO)
        if not self.pvinfoLogger.handlers:
            self.pvinfoLogger.addHandler(self.logstream)
        if not self.pvinfoLogger.filters:
            self.pvinfoLogger.addFilter(pvinfoFilter(LOGGER_NAME))
        self.pvinfoLogger.propagate = False
        logging.addLevelName(level.VERBOSE.value, level.VERBOSE.name)
        logging.addLevelName(level.HAL.value, level.HAL.name)
        logging.addLevelName(level.HELPER.value, level.HELPER.name)
        self.logstream.setFormatter(pvinfoStreamFormatter('%(additional)s%(message)s'))
        self.logFormatter = logging.Formatter('%(additional)s%(message)s')

    def log(self, text: str, level: level = level.INFO) -> None:
        """Sends plain text to logging."""
        self.pvinfoLogger.log(level.value, '%s', text)

    def log_verbose(self, text: str) -> None:
        """Logs a Verbose message"""
        self.log(text, level.VERBOSE)

    def log_hal(self, text: str) -> None:
        self.log(text, level.HAL)

    def log_helper(self, text: str) -> None:
        self.log(text, level.HELPER)

    def log_debug(self, text: str) -> None:
        self.log(text, level.DEBUG)

    def log_error(self, text: str) -> None:
        """Logs an Error message"""
        self.log(text, level.ERROR)

    def set_log_level(self, verbose: bool, hal: bool, debug: bool) -> None:
        self.VERBOSE = True if verbose else self.VERBOSE
        self.HAL = True if hal else self.HAL
        self.DEBUG = True if debug else self.DEBUG
        if self.DEBUG:
            self.pvinfoLogger.setLevel(level.DEBUG.value)
        elif self.HAL:
            self.pvinfoLogger.setLevel(level.HAL.value)
        elif self.VERBOSE:
            self.pvinfoLogger.setLevel(level.VERBOSE.value)
        else:
            self.pvinfoLogger.setLevel(level.INFO.value)

    def set_log_file(self, name: str) -> None:
        """Sets the log file for the output."""
        # Close current log file if it's opened
        self.close()
        try:
            self.logfile = logging.FileHandler(filename=name, mode='a')
        except OSError:
            print(f'WARNING: Could not open log file: {name}')
        else:
            self.pvinfoLogger.addHandler(self.logfile)
            self.logfile.setFormatter(self.logFormatter)

    def close(self) -> None:
        """Closes the log file."""
        if self.logfile:
            try:
                self.pvinfoLogger.removeHandler(self.logfile)
                self.logfile.close()
                self.logstream.flush()
            except OSError:
                print('WARNING: Could not close log file')
            finally:
                self.logfile = None

    def remove_pvinfo_logger(self) -> None:
        while self.pvinfoLogger.filters:
            self.pvinfoLogger.removeFilter(self.pvinfoLogger.filters[0])
        while self.pvinfoLogger.handlers:
            self.pvinfoLogger.removeHandler(self.pvinfoLogger.handlers[0])

    VERBOSE: bool = False
    HAL: bool = False
    DEBUG: bool = False


_logger = Logger()


def logger() -> Logger:
    """Returns a Logger instance."""
    return _logger
