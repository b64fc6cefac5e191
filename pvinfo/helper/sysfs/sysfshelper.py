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
Reads Ultravisor information from the sysfs firmware interface
"""

import os
from typing import Optional
from pvinfo.helper.basehelper import Helper
from pvinfo.library.file import read_file, validate_directory_path
from pvinfo.library.logger import logger


class SysfsHelper(Helper):

    def __init__(self, uv_folder: str, description_dir: str):
        super(SysfsHelper, self).__init__()
        self.name = 'SysfsHelper'
        self.uv_folder = uv_folder
        self.description_dir = description_dir
        self.location = uv_folder

    def exists(self) -> bool:
        return validate_directory_path(self.uv_folder)

    def _read(self, base: str, name: str) -> Optional[bytes]:
        path = os.path.join(base, name)
        data = read_file(path)
        if data is None:
            logger().log_helper(f'[helper] {path} is not available')
        return data

    def read_uv(self, name: str) -> Optional[bytes]:
        return self._read(self.uv_folder, name)

    def read_description(self, name: str) -> Optional[bytes]:
        return self._read(self.description_dir, name)
