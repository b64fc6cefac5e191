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


# ================================================
# PVINFO common
# ================================================

class PVConfigError(RuntimeError):
    pass


class PVReadError(RuntimeError):
    def __init__(self, msg: str) -> None:
        super(PVReadError, self).__init__(msg)


# Ultravisor
class UnknownCategoryError(RuntimeError):
    """Raised when a report category key is not defined."""
    pass
