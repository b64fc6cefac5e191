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
To execute: python[3] -m unittest tests.library.test_bitdecode
"""

import unittest

from pvinfo.library.bitdecode import (decode, decode_flags, decode_versions, ReservedMatch,
                                      NO_ACTIVE_ENTRIES, NO_ACTIVE_FLAGS, NO_SUPPORTED_VERSIONS)

TABLE_64 = [f'Capability {index}' for index in range(64)]


class TestDecode(unittest.TestCase):
    def test_zero_mask_is_sentinel(self) -> None:
        self.assertEqual(decode(0, TABLE_64), [NO_ACTIVE_ENTRIES])
        self.assertEqual(decode(0, [], report_unmapped=True), [NO_ACTIVE_ENTRIES])
        self.assertEqual(decode(0, TABLE_64, sentinel='nothing'), ['nothing'])

    def test_msb_reserved_line(self) -> None:
        self.assertEqual(decode(0x8000000000000000, ['Reserved']), ['Reserved Bit-0'])

    def test_lsb_is_last_line(self) -> None:
        self.assertEqual(decode(0x1, TABLE_64), ['Capability 63'])

    def test_lsb_confidential(self) -> None:
        self.assertEqual(decode(0x1, TABLE_64, reserved=[63]), ['Confidential - report as reserved Bit-63'])

    def test_confidential_wins_over_text(self) -> None:
        table = ['Reserved', 'Named', 'Other']
        self.assertEqual(decode(0xE000000000000000, table, reserved=[0, 1]),
                         ['Confidential - report as reserved Bit-0',
                          'Confidential - report as reserved Bit-1',
                          'Other'])

    def test_order_follows_line_index(self) -> None:
        result = decode(0xFFFFFFFFFFFFFFFF, TABLE_64)
        self.assertEqual(result, TABLE_64)

    def test_unset_bits_are_skipped(self) -> None:
        self.assertEqual(decode(0x5000000000000000, ['a', 'b', 'c', 'd']), ['b', 'd'])

    def test_text_is_verbatim(self) -> None:
        self.assertEqual(decode(0x8000000000000000, ['  Padded text  ']), ['  Padded text  '])
        self.assertEqual(decode(0x8000000000000000, ['  Reserved  ']), ['Reserved Bit-0'])

    def test_reserved_exact_match(self) -> None:
        table = ['Reserved for future use']
        self.assertEqual(decode(0x8000000000000000, table), ['Reserved for future use'])

    def test_reserved_contains_match(self) -> None:
        table = ['Reserved for future use']
        self.assertEqual(decode(0x8000000000000000, table, reserved_match=ReservedMatch.CONTAINS),
                         ['Reserved for future use Bit-0'])

    def test_unmapped_bits(self) -> None:
        mask = 0x8000000000000001
        self.assertEqual(decode(mask, ['First']), ['First'])
        self.assertEqual(decode(mask, ['First'], report_unmapped=True), ['First', 'Bit-63 is active'])

    def test_unmapped_only_is_not_sentinel(self) -> None:
        self.assertEqual(decode(0x2, [], report_unmapped=True), ['Bit-62 is active'])

    def test_lines_beyond_64_are_ignored(self) -> None:
        table = TABLE_64 + ['Unreachable']
        self.assertEqual(decode(0xFFFFFFFFFFFFFFFF, table, report_unmapped=True), TABLE_64)

    def test_reserved_outside_table_is_inert(self) -> None:
        self.assertEqual(decode(0x8000000000000001, ['First'], reserved=[70, 63], report_unmapped=True),
                         ['First', 'Bit-63 is active'])


class TestDecodeVersions(unittest.TestCase):
    def test_no_versions(self) -> None:
        self.assertEqual(decode_versions(0), [NO_SUPPORTED_VERSIONS])

    def test_bit_zero(self) -> None:
        self.assertEqual(decode_versions(0x1), ['version 100 hex is supported'])

    def test_bit_63(self) -> None:
        self.assertEqual(decode_versions(0x8000000000000000), ['version 4000 hex is supported'])

    def test_every_bit(self) -> None:
        for bit_index in range(64):
            self.assertEqual(decode_versions(1 << bit_index),
                             [f'version {(bit_index + 1) * 256:x} hex is supported'])

    def test_ascending_order(self) -> None:
        self.assertEqual(decode_versions(0x6),
                         ['version 200 hex is supported', 'version 300 hex is supported'])


class TestDecodeFlags(unittest.TestCase):
    def test_disable_dumping(self) -> None:
        flags = {0: 'Disable dumping'}
        self.assertEqual(decode_flags(0x1, flags), ['Disable dumping'])
        self.assertEqual(decode_flags(0x0, flags), [NO_ACTIVE_FLAGS])

    def test_unnamed_bits_are_ignored(self) -> None:
        self.assertEqual(decode_flags(0xFFFFFFFFFFFFFFFE, {0: 'Disable dumping'}), [NO_ACTIVE_FLAGS])

    def test_most_significant_first(self) -> None:
        self.assertEqual(decode_flags(0x81, {0: 'low', 7: 'high'}), ['high', 'low'])


if __name__ == '__main__':
    unittest.main()
