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

import traceback
from argparse import ArgumentParser
from typing import Optional, Sequence

from pvinfo.library.logger import logger
from pvinfo.library.report import FORMATS, Section, make_section, render
from pvinfo.library.returncode import ExitCode


class BaseCommand:

    def __init__(self, argv, uv=None, fmt: str = 'text'):
        self.argv = argv
        self.logger = logger()
        self.uv = uv
        self.format = fmt
        self.ExitCode = ExitCode.OK

    def run(self) -> None:
        try:
            self.func()
        except Exception:
            self.logger.log_error('An error occured during the execution of the command!')
            self.logger.log_error('Please run with the debug option for further details')
            if self.logger.DEBUG:
                traceback.print_exc()
            self.ExitCode = ExitCode.EXCEPTION

    def set_up(self) -> None:
        pass

    def tear_down(self) -> None:
        pass

    def parse_arguments(self) -> None:
        raise NotImplementedError('sub class should overwrite the parse_arguments() method')

    def add_format_argument(self, parser: ArgumentParser) -> None:
        parser.add_argument('-f', '--format', dest='output_format', choices=FORMATS, default=None,
                            help='Output format (overrides the global option)')

    def sections(self, keys: Sequence[str]) -> Sequence[Section]:
        return [make_section(key, self.uv.query(key)) for key in keys]

    def show(self, sections: Sequence[Section], fmt: Optional[str] = None) -> None:
        output_format = getattr(self, 'output_format', None) or fmt or self.format
        for line in render(sections, output_format):
            self.logger.log(line)
