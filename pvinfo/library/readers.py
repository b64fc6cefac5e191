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
Scalar readers for Ultravisor query files

The firmware interface exposes one value per file: a flag ("0"/"1"), a decimal
counter or a hexadecimal mask. A missing source and unparsable content are
reported the same way (False or None) and never raise.

usage:
    >>> read_flag(b'1\\n')
    True
    >>> read_integer(b'248\\n')
    248
    >>> read_hex_mask(b'0xe000000000000000\\n')
    16140901064495857664
"""

import re
from typing import List, Optional, Union
from pvinfo.library.bits import fits_in

RawData = Optional[Union[bytes, bytearray, str]]

_DECIMAL_RE = re.compile(r'^[0-9]+$')
_HEX_RE = re.compile(r'^[0-9a-fA-F]+$')


def _to_text(data: RawData) -> Optional[str]:
    if data is None:
        return None
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError:
        return None


def first_line(data: RawData) -> Optional[str]:
    """Returns the first non-empty line, trimmed, or None."""
    text = _to_text(data)
    if text is None:
        return None
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return None


def read_lines(data: RawData) -> List[str]:
    text = _to_text(data)
    if text is None:
        return []
    return text.splitlines()


def read_flag(data: RawData) -> bool:
    return first_line(data) == '1'


def read_integer(data: RawData) -> Optional[int]:
    line = first_line(data)
    if line is None or not _DECIMAL_RE.match(line):
        return None
    value = int(line, 10)
    return value if fits_in(value) else None


def read_hex_mask(data: RawData) -> Optional[int]:
    line = first_line(data)
    if line is None:
        return None
    if line[:2] in ('0x', '0X'):
        line = line[2:]
    if not _HEX_RE.match(line):
        return None
    value = int(line, 16)
    return value if fits_in(value) else None
