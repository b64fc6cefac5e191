#!/usr/bin/env python3
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
Protected Virtualization (Secure Execution) information utility
"""

import argparse
import importlib
import os
import sys

from typing import Any, Dict, Optional, Sequence
from pvinfo.hal.uv import UV
from pvinfo.helper.sysfs.sysfshelper import SysfsHelper
from pvinfo.library.defines import get_version
from pvinfo.library.file import get_package_dir
from pvinfo.library.logger import logger
from pvinfo.library.options import Options
from pvinfo.library.report import FORMATS
from pvinfo.library.returncode import ExitCode

DEFAULT_COMMAND = 'info'


def import_cmds() -> Dict[str, Any]:
    """Determine available pvinfo commands"""
    cmds_dir = get_package_dir('utilcmd')
    cmds = sorted(i[:-3] for i in os.listdir(cmds_dir) if i[-3:] == ".py" and not i[:2] == "__")

    if logger().DEBUG:
        logger().log('[PVINFO] Loaded command-line extensions:')
        logger().log(f'   {cmds}')
    commands = {}
    for cmd in cmds:
        try:
            module = importlib.import_module(f'pvinfo.utilcmd.{cmd}')
            commands.update(getattr(module, 'commands'))
        except (ImportError, AttributeError) as msg:
            # Display the import error and continue to import commands
            logger().log_error(f"Exception occurred during import of {cmd}: '{str(msg)}'")
            continue
    return commands


def build_parser(cmds: Dict[str, Any], default_format: str) -> argparse.ArgumentParser:
    global_usage = "Additional arguments for the command; run '%(prog)s <command> -h' for details.\n\n"
    parser = argparse.ArgumentParser(prog='pvinfo', usage='%(prog)s [options] [<command>] [command args]',
                                     add_help=False, allow_abbrev=False,
                                     formatter_class=argparse.RawDescriptionHelpFormatter,
                                     epilog=ExitCode.help_epilog)
    options = parser.add_argument_group('Options')
    options.add_argument('-h', '--help', dest='show_help', help="Show this message and exit", action='store_true')
    options.add_argument('-V', '--version', dest='show_version', help='Show the version and exit', action='store_true')
    options.add_argument('-v', '--verbose', help='Verbose logging', action='store_true')
    options.add_argument('--hal', help='HAL logging', action='store_true')
    options.add_argument('-d', '--debug', help='Debug logging', action='store_true')
    options.add_argument('-l', '--log', help='Output to log file')
    options.add_argument('-f', '--format', dest='_format', choices=FORMATS, default=default_format,
                         help=f'Output format (default: {default_format})')
    options.add_argument('--uv-folder', dest='_uv_folder', default=None,
                         help='Ultravisor folder to read instead of the configured one')
    options.add_argument('--desc-dir', dest='_desc_dir', default=None,
                         help='Folder holding the bit description tables')
    options.add_argument('_cmd', metavar='Command', nargs='?', choices=sorted(cmds.keys()), default=DEFAULT_COMMAND,
                         help=f"Command to run: {{{','.join(sorted(cmds.keys()))}}} (default: {DEFAULT_COMMAND})")
    options.add_argument('_cmd_args', metavar='Command Args', nargs=argparse.REMAINDER, help=global_usage)
    return parser


def parse_args(argv: Sequence[str]) -> Optional[Dict[str, Any]]:
    """Parse the arguments provided on the command line."""
    options = Options()
    default_format = options.get_section_data('Util_Config', 'default_format', 'text') or 'text'
    if default_format not in FORMATS:
        default_format = 'text'
    cmds = import_cmds()
    parser = build_parser(cmds, default_format)

    if list(argv) == ['--']:
        parser.print_help()
        return {'_exit_code': ExitCode.ERROR}

    namespace, extras = parser.parse_known_args(argv)
    par = vars(namespace)

    if par['show_help']:
        parser.print_help()
        return None
    if par['show_version']:
        print(f'pvinfo {get_version()}')
        return None

    # Options of the default command may be given without naming it
    par['_cmd_args'] = list(par['_cmd_args']) + extras
    par['commands'] = cmds
    par['options'] = options
    return par


def parser_exit_code(err: SystemExit) -> int:
    """Maps an argparse exit (help or usage error) to a pvinfo exit code."""
    return ExitCode.ERROR if err.code else ExitCode.OK


class PvInfoUtil:

    def __init__(self, switches, argv):
        self.logger = logger()
        self.commands = switches['commands']
        self.__dict__.update(switches)
        self.argv = argv
        self.parse_switches()
        self._helper = self.create_helper()

    def parse_switches(self) -> None:
        self.logger.set_log_level(self.verbose, self.hal, self.debug)
        if self.log:
            self.logger.set_log_file(self.log)

    def create_helper(self) -> SysfsHelper:
        uv_folder = self._uv_folder or self.options.get_section_data('Util_Config', 'uv_folder', '/sys/firmware/uv')
        desc_dir = self._desc_dir or self.options.get_section_data('Util_Config', 'description_dir', '')
        if not desc_dir:
            desc_dir = get_package_dir('descriptions')
        return SysfsHelper(uv_folder, desc_dir)

    ##################################################################################
    # Entry point
    ##################################################################################

    def main(self) -> int:
        """Receives and executes the commands"""
        uv = UV(self._helper)
        comm = self.commands[self._cmd](self._cmd_args, uv=uv, fmt=self._format)
        try:
            comm.parse_arguments()
        except SystemExit as err:
            return parser_exit_code(err)

        if not uv.is_available():
            (_, location) = self._helper.get_info()
            self.logger.log(f'UV directory not found at {location}')
            self.logger.log('Does not operate as a SE host or SE guest.')
            return ExitCode.NOTAPPLICABLE

        (helper_name, location) = self._helper.get_info()
        self.logger.log_verbose(f"[PVINFO] Executing command '{self._cmd}' with args {self._cmd_args} ({helper_name}: {location})")

        try:
            comm.set_up()
        except Exception as msg:
            self.logger.log_error(str(msg))
            return ExitCode.EXCEPTION

        comm.run()
        comm.tear_down()
        return comm.ExitCode


def run(cli_cmd: str = '') -> int:
    cli_cmds = []
    if cli_cmd:
        cli_cmds = cli_cmd.strip().split(' ')
    return main(cli_cmds)


def main(argv: Sequence[str] = sys.argv[1:]) -> int:
    try:
        par = parse_args(argv)
    except SystemExit as err:
        return parser_exit_code(err)
    if par is None:
        return ExitCode.OK
    if '_exit_code' in par:
        return par['_exit_code']
    pvinfoMain = PvInfoUtil(par, argv)
    try:
        return pvinfoMain.main()
    finally:
        pvinfoMain.logger.close()


if __name__ == "__main__":
    sys.exit(main())
