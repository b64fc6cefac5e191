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
Reading from files with validation support

usage:
    >>> read_file(filename)
    >>> validate_file_exists(filename)
    >>> validate_directory_path(dirname)
"""

import os
from typing import Optional
from pvinfo.library.logger import logger


def read_file(filename: str) -> Optional[bytes]:
    """
    Read file contents.

    Returns:
        File contents as bytes, or None if the file is absent or unreadable
    """
    if not validate_file_exists(filename):
        return None

    try:
        with open(filename, 'rb') as f:
            _file = f.read()
            logger().log_debug(f"[file] Read {len(_file):d} bytes from '{filename:.256}'")
            return _file
    except OSError:
        logger().log_debug(f"[file] Unable to open file '{filename:.256}' for read access")
        return None


def get_main_dir() -> str:
    path = os.path.abspath(os.path.join(os.path.dirname(__file__), os.path.pardir, os.path.pardir))
    return path


def get_package_dir(*parts: str) -> str:
    return os.path.join(get_main_dir(), 'pvinfo', *parts)


# ================================================
# File Validation Functions
# ================================================

def validate_file_exists(filepath: str) -> bool:
    """Returns True if filepath names an existing regular file."""
    if not filepath or not os.path.exists(filepath):
        logger().log_debug(f"[file] File not present: '{filepath:.256}'")
        return False
    if not os.path.isfile(filepath):
        logger().log_debug(f"[file] Path is not a file: '{filepath:.256}'")
        return False
    return True


def validate_directory_path(dirpath: str) -> bool:
    """Returns True if dirpath names an existing directory."""
    if not dirpath:
        return False
    return os.path.isdir(dirpath)
