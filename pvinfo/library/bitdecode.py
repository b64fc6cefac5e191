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
Bit mask decoding against description tables

Ultravisor masks number their bits from the most significant end: line 0 of a
description table labels bit 63 of the value, line k labels bit (63 - k).
Every marker emitted by this module uses that line index ("Bit-N").

usage:
    >>> decode(0x8000000000000000, ['Reserved'])
    ['Reserved Bit-0']
    >>> decode_versions(0x3)
    ['version 100 hex is supported', 'version 200 hex is supported']
    >>> decode_flags(0x1, {0: 'Disable dumping'})
    ['Disable dumping']
"""

from enum import Enum
from typing import Dict, Iterable, List, Sequence
from pvinfo.library.bits import bit, is_set

MASK_WIDTH = 64
RESERVED_LABEL = 'Reserved'

NO_ACTIVE_ENTRIES = 'no active entries'
NO_ACTIVE_FLAGS = 'no active flags'
NO_SUPPORTED_VERSIONS = 'no supported versions'


class ReservedMatch(Enum):
    """How a description line is recognized as a reserved bit."""
    EXACT = 'exact'
    CONTAINS = 'contains'

    def matches(self, text: str) -> bool:
        if self is ReservedMatch.CONTAINS:
            return RESERVED_LABEL in text
        return text == RESERVED_LABEL


def bit_position(line_index: int) -> int:
    return MASK_WIDTH - 1 - line_index


def confidential_marker(line_index: int) -> str:
    return f'Confidential - report as reserved Bit-{line_index:d}'


def reserved_marker(text: str, line_index: int) -> str:
    return f'{text} Bit-{line_index:d}'


def unmapped_marker(line_index: int) -> str:
    return f'Bit-{line_index:d} is active'


def version_label(bit_index: int) -> str:
    return f'version {(bit_index + 1) * 0x100:x} hex is supported'


def decode(mask: int,
           table: Sequence[str],
           reserved: Iterable[int] = (),
           sentinel: str = NO_ACTIVE_ENTRIES,
           reserved_match: ReservedMatch = ReservedMatch.EXACT,
           report_unmapped: bool = False) -> List[str]:
    """
    Decode a 64-bit mask against an ordered description table.

    Args:
        mask: value read from the firmware interface
        table: description lines, line k labels bit (63 - k)
        reserved: line indices always reported as confidential
        sentinel: single entry returned when no bit is reported
        reserved_match: policy recognizing "Reserved" description lines
        report_unmapped: also report set bits the table does not describe

    Returns:
        Entries ordered by ascending line index (descending bit significance)
    """
    reserved_lines = frozenset(reserved)
    described = min(len(table), MASK_WIDTH)
    out = []
    for line_index in range(described):
        if not is_set(mask, bit(bit_position(line_index))):
            continue
        text = table[line_index].rstrip('\r\n')
        if line_index in reserved_lines:
            out.append(confidential_marker(line_index))
        elif reserved_match.matches(text.strip()):
            out.append(reserved_marker(text.strip(), line_index))
        else:
            out.append(text)

    if report_unmapped:
        for line_index in range(described, MASK_WIDTH):
            if is_set(mask, bit(bit_position(line_index))):
                out.append(unmapped_marker(line_index))

    if not out:
        out.append(sentinel)
    return out


def decode_versions(mask: int, sentinel: str = NO_SUPPORTED_VERSIONS) -> List[str]:
    """Each set bit b, counted from the least significant end, announces version (b + 1) * 0x100."""
    out = [version_label(bit_index) for bit_index in range(MASK_WIDTH) if is_set(mask, bit(bit_index))]
    if not out:
        out.append(sentinel)
    return out


def decode_flags(mask: int, flags: Dict[int, str], sentinel: str = NO_ACTIVE_FLAGS) -> List[str]:
    """Reports the labels of the named bit positions set in mask, most significant first."""
    out = [flags[position] for position in sorted(flags, reverse=True) if is_set(mask, bit(position))]
    if not out:
        out.append(sentinel)
    return out
