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
Serves Ultravisor information from memory or from a recorded JSON file

JSON layout:
    {
      "available": true,
      "uv": {"prot_virt_host": "1", "query/facilities": "0xe000000000000000"},
      "descriptions": {"facilities.txt": "..."}
    }
"""

from json import loads
from typing import Dict, Optional
from pvinfo.helper.basehelper import Helper
from pvinfo.library.exceptions import PVReadError
from pvinfo.library.file import read_file
from pvinfo.library.logger import logger


class ReplayHelper(Helper):

    def __init__(self, uv_files: Optional[Dict[str, str]] = None,
                 descriptions: Optional[Dict[str, str]] = None,
                 available: bool = True):
        super(ReplayHelper, self).__init__()
        self.name = 'ReplayHelper'
        self.location = 'memory'
        self.available = available
        self._uv = dict(uv_files or {})
        self._descriptions = dict(descriptions or {})

    @classmethod
    def from_json(cls, filepath: str) -> 'ReplayHelper':
        file_data = read_file(filepath)
        if file_data is None:
            raise PVReadError(f'Unable to open JSON File: {filepath}')
        try:
            data = loads(file_data)
        except ValueError as err:
            raise PVReadError(f'Unable to load JSON File: {filepath}') from err
        helper = cls(data.get('uv'), data.get('descriptions'), data.get('available', True))
        helper.location = filepath
        return helper

    def exists(self) -> bool:
        return self.available

    @staticmethod
    def _get_element(source: Dict[str, str], name: str) -> Optional[bytes]:
        if name not in source:
            logger().log_helper(f'[helper] Missing entry for {name}')
            return None
        return str(source[name]).encode('utf-8')

    def read_uv(self, name: str) -> Optional[bytes]:
        return self._get_element(self._uv, name)

    def read_description(self, name: str) -> Optional[bytes]:
        return self._get_element(self._descriptions, name)
