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
To execute: python[3] -m unittest tests.library.test_logger
"""

import logging
import os
import tempfile
import unittest

from pvinfo.library.logger import Logger, level, pvinfoFilter


class TestLogger(unittest.TestCase):
    def _record(self, lvl: level) -> logging.LogRecord:
        return logging.LogRecord('PVINFO_LOGGER', lvl.value, __file__, 0, 'text', None, None)

    def test_prefixes(self) -> None:
        log_filter = pvinfoFilter()
        expected = {level.INFO: '', level.ERROR: 'ERROR: ', level.HAL: '[*] [HAL] ',
                    level.HELPER: '[*] [HELPER] ', level.DEBUG: '[*] [DEBUG] '}
        for lvl, prefix in expected.items():
            record = self._record(lvl)
            self.assertTrue(log_filter.filter(record))
            self.assertEqual(record.additional, prefix)

    def test_log_file(self) -> None:
        fileno, path = tempfile.mkstemp(suffix='.log')
        os.close(fileno)
        log = Logger()
        try:
            log.set_log_file(path)
            log.log('Secure Execution Host Mode')
            log.log_error('bad value')
            log.log_hal('not shown')
            log.close()
            with open(path) as f:
                self.assertEqual(f.read().splitlines(), ['Secure Execution Host Mode', 'ERROR: bad value'])
        finally:
            log.close()
            os.remove(path)


if __name__ == '__main__':
    unittest.main()
