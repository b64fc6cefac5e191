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
To execute: python[3] -m unittest tests.utilcmd.test_pvinfo_util
"""

import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

import pvinfo_util
from pvinfo.helper.replay.replayhelper import ReplayHelper
from pvinfo.library.returncode import ExitCode
from tests.utilcmd.run_pvinfo_util import setup_run_destroy_util_get_log_output
from tests.uv_fixtures import HOST_UV_FILES


class TestPvInfoUtil(unittest.TestCase):
    def test_not_applicable(self) -> None:
        retval, lines = setup_run_destroy_util_get_log_output(ReplayHelper(available=False), '--facilities')
        self.assertEqual(retval, ExitCode.NOTAPPLICABLE)
        self.assertEqual(lines, ['UV directory not found at memory',
                                 'Does not operate as a SE host or SE guest.'])

    def test_missing_uv_folder(self) -> None:
        root = tempfile.mkdtemp()
        try:
            missing = os.path.join(root, 'uv')
            retval, lines = setup_run_destroy_util_get_log_output(None, f'--uv-folder {missing}')
        finally:
            shutil.rmtree(root)
        self.assertEqual(retval, ExitCode.NOTAPPLICABLE)
        self.assertEqual(lines[0], f'UV directory not found at {missing}')

    def test_uv_folder_option(self) -> None:
        root = tempfile.mkdtemp()
        try:
            query = os.path.join(root, 'query')
            os.makedirs(query)
            with open(os.path.join(query, 'facilities'), 'w') as uv_file:
                uv_file.write(HOST_UV_FILES['query/facilities'])
            retval, lines = setup_run_destroy_util_get_log_output(None, f'--uv-folder {root} --facilities')
        finally:
            shutil.rmtree(root)
        self.assertEqual(retval, ExitCode.OK)
        self.assertEqual(lines[:2], ['Facilities: Installed Ultravisor Calls', 'Query Ultravisor Information'])

    def test_desc_dir_option(self) -> None:
        root = tempfile.mkdtemp()
        try:
            os.makedirs(os.path.join(root, 'query'))
            with open(os.path.join(root, 'query', 'supp_att_pflags'), 'w') as uv_file:
                uv_file.write('0x8000000000000000\n')
            with open(os.path.join(root, 'supp_att_pflags.txt'), 'w') as desc_file:
                desc_file.write('Custom flag\n')
            helper_args = f'--desc-dir {root} --supported-plaintext-attestation-flags'
            retval, lines = setup_run_destroy_util_get_log_output(None, f'--uv-folder {root} {helper_args}')
        finally:
            shutil.rmtree(root)
        self.assertEqual(retval, ExitCode.OK)
        self.assertEqual(lines, ['Supported Plaintext Attestation Flags:', 'Custom flag'])

    def test_double_dash_prints_help(self) -> None:
        with redirect_stdout(io.StringIO()) as out:
            self.assertEqual(pvinfo_util.main(['--']), ExitCode.ERROR)
        self.assertIn('usage: pvinfo', out.getvalue())

    def test_help(self) -> None:
        with redirect_stdout(io.StringIO()) as out:
            self.assertEqual(pvinfo_util.main(['-h']), ExitCode.OK)
        self.assertIn('supported-flags', out.getvalue())

    def test_version(self) -> None:
        with redirect_stdout(io.StringIO()) as out:
            self.assertEqual(pvinfo_util.main(['--version']), ExitCode.OK)
        self.assertTrue(out.getvalue().startswith('pvinfo '))

    def test_import_cmds(self) -> None:
        self.assertEqual(sorted(pvinfo_util.import_cmds().keys()), ['info', 'supported-flags'])

    def test_unknown_command(self) -> None:
        with redirect_stderr(io.StringIO()) as err:
            self.assertEqual(pvinfo_util.main(['bogus']), ExitCode.ERROR)
        self.assertIn('invalid choice', err.getvalue())

    def test_unknown_option(self) -> None:
        with redirect_stderr(io.StringIO()) as err:
            self.assertEqual(pvinfo_util.main(['--no-such-flag']), ExitCode.ERROR)
        self.assertIn('--no-such-flag', err.getvalue())

    def test_bad_format(self) -> None:
        with redirect_stderr(io.StringIO()):
            self.assertEqual(pvinfo_util.main(['-f', 'xml']), ExitCode.ERROR)

    def test_command_option_error(self) -> None:
        with redirect_stderr(io.StringIO()):
            self.assertEqual(pvinfo_util.main(['supported-flags', '--bogus']), ExitCode.ERROR)

    def test_command_help(self) -> None:
        with redirect_stdout(io.StringIO()) as out:
            self.assertEqual(pvinfo_util.main(['info', '-h']), ExitCode.OK)
        self.assertIn('--facilities', out.getvalue())


if __name__ == '__main__':
    unittest.main()
