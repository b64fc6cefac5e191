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
Ultravisor (UV) query information

usage:
    >>> uv = UV(helper)
    >>> uv.se_mode()
    >>> uv.collect('facilities')
    >>> uv.limits()
    >>> uv.collect_all()
"""

from collections import namedtuple
from typing import Dict, List, Union
from pvinfo.helper.basehelper import Helper
from pvinfo.library.bitdecode import (decode, decode_flags, decode_versions, ReservedMatch,
                                      NO_ACTIVE_ENTRIES, NO_ACTIVE_FLAGS, NO_SUPPORTED_VERSIONS)
from pvinfo.library.exceptions import UnknownCategoryError
from pvinfo.library.logger import logger
from pvinfo.library.mode import SEMode, resolve_mode
from pvinfo.library.readers import read_flag, read_hex_mask, read_integer, read_lines
from pvinfo.library.report import AggregateReport, Limits, REPORT_KEYS

PROT_VIRT_GUEST = 'prot_virt_guest'
PROT_VIRT_HOST = 'prot_virt_host'
QUERY_DIR = 'query'

# Decoder kinds
BITS = 'bits'
VERSIONS = 'versions'
FLAGS = 'flags'

Category = namedtuple('Category', ['key', 'mask_file', 'kind', 'description_file', 'reserved',
                                   'sentinel', 'reserved_match', 'report_unmapped', 'flags'])


def _bits(key, mask_file, description_file, reserved=(), report_unmapped=True):
    return Category(key, mask_file, BITS, description_file, frozenset(reserved),
                    NO_ACTIVE_ENTRIES, ReservedMatch.EXACT, report_unmapped, None)


def _versions(key, mask_file):
    return Category(key, mask_file, VERSIONS, None, frozenset(), NO_SUPPORTED_VERSIONS,
                    ReservedMatch.EXACT, False, None)


def _flags(key, mask_file, flags):
    return Category(key, mask_file, FLAGS, None, frozenset(), NO_ACTIVE_FLAGS,
                    ReservedMatch.EXACT, False, flags)


# Add-secret plaintext flags, keyed by bit position from the least significant end
ADD_SECRET_FLAGS = {0: 'Disable dumping'}

CATEGORIES = (
    _bits('facilities', 'facilities', 'facilities.txt', reserved=[10]),
    _bits('feature_indications', 'feature_indications', 'feature_indications.txt', reserved=[0, 2, 3]),
    _flags('supported_plaintext_add_secret_flags', 'supp_add_secret_pcf', ADD_SECRET_FLAGS),
    _versions('supported_add_secret_request_versions', 'supp_add_secret_req_ver'),
    _versions('supported_attestation_request_versions', 'supp_att_req_hdr_ver'),
    _bits('supported_plaintext_control_flags', 'supp_se_hdr_pcf', 'supp_se_hdr_pcf.txt', report_unmapped=False),
    _versions('supported_se_header_versions', 'supp_se_hdr_ver'),
    _bits('supported_plaintext_attestation_flags', 'supp_att_pflags', 'supp_att_pflags.txt', report_unmapped=False),
    _bits('supported_secret_types', 'supp_secret_types', 'supp_secret_types.txt'),
)

CATEGORY_BY_KEY = {category.key: category for category in CATEGORIES}

LIMIT_FILES = {
    'maximal_address': 'max_address',
    'maximal_number_of_associated_secrets': 'max_assoc_secrets',
    'maximal_number_of_cpus': 'max_cpus',
    'maximal_number_of_se_guests': 'max_guests',
    'maximal_number_of_retrievable_secrets': 'max_retr_secrets',
    'maximal_number_of_secrets': 'max_secrets',
}


def query_file(name: str) -> str:
    return f'{QUERY_DIR}/{name}'


class UV:

    def __init__(self, helper: Helper):
        self.helper = helper

    def is_available(self) -> bool:
        return self.helper.exists()

    def se_mode(self) -> SEMode:
        guest = read_flag(self.helper.read_uv(PROT_VIRT_GUEST))
        host = read_flag(self.helper.read_uv(PROT_VIRT_HOST))
        mode = resolve_mode(guest, host)
        logger().log_hal(f'[uv] guest={guest} host={host} -> {mode.name}')
        return mode

    def read_mask(self, category: Category):
        mask = read_hex_mask(self.helper.read_uv(query_file(category.mask_file)))
        if mask is None:
            logger().log_hal(f'[uv] {category.key}: no value')
        else:
            logger().log_hal(f'[uv] {category.key}: 0x{mask:016X}')
        return mask

    def description_table(self, category: Category) -> List[str]:
        table = read_lines(self.helper.read_description(category.description_file))
        if not table:
            logger().log_hal(f'[uv] {category.key}: no description table {category.description_file}')
        return table

    def decode_category(self, category: Category, mask: int) -> List[str]:
        if category.kind == VERSIONS:
            return decode_versions(mask, category.sentinel)
        if category.kind == FLAGS:
            return decode_flags(mask, category.flags, category.sentinel)
        return decode(mask,
                      self.description_table(category),
                      category.reserved,
                      category.sentinel,
                      category.reserved_match,
                      category.report_unmapped)

    def collect(self, key: str) -> List[str]:
        category = CATEGORY_BY_KEY.get(key)
        if category is None:
            raise UnknownCategoryError(f'Unknown report category: {key}')
        mask = self.read_mask(category)
        if mask is None:
            return [category.sentinel]
        return self.decode_category(category, mask)

    def limits(self) -> Limits:
        values = {}
        for name, filename in LIMIT_FILES.items():
            value = read_integer(self.helper.read_uv(query_file(filename)))
            if value is None:
                logger().log_hal(f'[uv] {name}: no value, using 0')
                value = 0
            values[name] = value
        return Limits(**values)

    def query(self, key: str) -> Union[SEMode, List[str], Limits]:
        """Returns the value reported for one report key."""
        if key == 'se_status':
            return self.se_mode()
        if key == 'limits':
            return self.limits()
        return self.collect(key)

    def collect_all(self) -> AggregateReport:
        values: Dict[str, Union[SEMode, List[str], Limits]] = {key: self.query(key) for key in REPORT_KEYS}
        return AggregateReport(**values)
