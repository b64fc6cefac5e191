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


class ExitCode:
    OK = 0
    ERROR = 16
    EXCEPTION = 32
    NOTAPPLICABLE = 128

    help_epilog = """\
  Exit Code
  ---------
  PVINFO returns an integer exit code:
  - 0:    the requested information was reported
  - 16:   the command line could not be used
  - 32:   an unexpected exception occurred while collecting the information
  - 128:  not applicable, the system does not operate as a SE host or SE guest
"""
