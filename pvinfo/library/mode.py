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
Secure Execution mode of the running system
"""

from enum import Enum


class SEMode(Enum):
    GUEST = 'Secure Execution Guest Mode'
    HOST = 'Secure Execution Host Mode'
    DISABLED = 'Secure Execution is disabled'
    CONFIGURATION_ERROR = 'Configuration error: both Guest and Host enabled'

    @property
    def description(self) -> str:
        return self.value


def resolve_mode(guest: bool, host: bool) -> SEMode:
    # Guest and host are mutually exclusive; both set is reported, not raised
    if guest and host:
        return SEMode.CONFIGURATION_ERROR
    if guest:
        return SEMode.GUEST
    if host:
        return SEMode.HOST
    return SEMode.DISABLED
