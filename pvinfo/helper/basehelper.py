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

from abc import ABC, abstractmethod
from typing import Optional, Tuple

# Base class for the helpers


class Helper(ABC):

    @abstractmethod
    def __init__(self):
        self.name = 'Helper'
        self.location = ''

    def get_info(self) -> Tuple[str, str]:
        return self.name, self.location

    #################################################################################################
    # Source functionality accessible to HAL components

    #
    # The Ultravisor folder holds prot_virt_guest, prot_virt_host and the query/ directory
    #
    @abstractmethod
    def exists(self) -> bool:
        pass

    #
    # name is relative to the Ultravisor folder, e.g. 'query/facilities'
    # None means the source is absent or could not be read
    #
    @abstractmethod
    def read_uv(self, name: str) -> Optional[bytes]:
        pass

    #
    # Bit description tables, e.g. 'facilities.txt'
    #
    @abstractmethod
    def read_description(self, name: str) -> Optional[bytes]:
        pass
