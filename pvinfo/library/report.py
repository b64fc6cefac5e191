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
Report records and their text, YAML and JSON renderings

usage:
    >>> sections = [make_section('facilities', ['Query Ultravisor Information'])]
    >>> render(sections, 'text')
    ['Facilities: Installed Ultravisor Calls', 'Query Ultravisor Information']
"""

import json
from dataclasses import dataclass, asdict, field, fields
from typing import Any, Dict, List, Sequence, Union

import yaml

from pvinfo.library.exceptions import UnknownCategoryError
from pvinfo.library.mode import SEMode

FORMATS = ('text', 'yaml', 'json')

# Document key order; also the order sections are shown in text mode
REPORT_KEYS = (
    'se_status',
    'facilities',
    'feature_indications',
    'supported_plaintext_add_secret_flags',
    'supported_add_secret_request_versions',
    'supported_attestation_request_versions',
    'supported_plaintext_control_flags',
    'supported_se_header_versions',
    'supported_plaintext_attestation_flags',
    'supported_secret_types',
    'limits',
)

HEADINGS = {
    'se_status': 'se_status:',
    'facilities': 'Facilities: Installed Ultravisor Calls',
    'feature_indications': 'Feature Indications: Ultravisor Features',
    'supported_plaintext_add_secret_flags': 'Supported Plaintext Add Secret Flags:',
    'supported_add_secret_request_versions': 'Supported Add Secret Request Versions:',
    'supported_attestation_request_versions': 'Supported Attestation Request Versions:',
    'supported_plaintext_control_flags': 'Supported Plaintext Control Flags:',
    'supported_se_header_versions': 'Supported SE Header Versions:',
    'supported_plaintext_attestation_flags': 'Supported Plaintext Attestation Flags:',
    'supported_secret_types': 'Supported Secret Types:',
    'limits': 'Limits:',
}


@dataclass(frozen=True)
class Limits:
    maximal_address: int = 0
    maximal_number_of_associated_secrets: int = 0
    maximal_number_of_cpus: int = 0
    maximal_number_of_se_guests: int = 0
    maximal_number_of_retrievable_secrets: int = 0
    maximal_number_of_secrets: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


LIMIT_LABELS = {
    'maximal_address': 'Maximal Address for a SE-Guest',
    'maximal_number_of_associated_secrets': 'Maximal number of associated secrets',
    'maximal_number_of_cpus': 'Maximal number of CPUs in one SE-Guest',
    'maximal_number_of_se_guests': 'Maximal number of SE-Guests',
    'maximal_number_of_retrievable_secrets': 'Maximal number of retrievable secrets',
    'maximal_number_of_secrets': 'Maximal number of secrets in the system',
}

SectionValue = Union[List[str], Limits]


@dataclass(frozen=True)
class Section:
    key: str
    heading: str
    value: SectionValue

    def lines(self) -> List[str]:
        if isinstance(self.value, Limits):
            return [f'{LIMIT_LABELS[f.name]} {getattr(self.value, f.name):d}' for f in fields(self.value)]
        return list(self.value)

    def document_value(self) -> Any:
        if isinstance(self.value, Limits):
            return self.value.as_dict()
        return list(self.value)


def make_section(key: str, value: Union[SectionValue, SEMode]) -> Section:
    if key not in HEADINGS:
        raise UnknownCategoryError(f'Unknown report category: {key}')
    if isinstance(value, SEMode):
        value = [value.description]
    return Section(key, HEADINGS[key], value)


@dataclass(frozen=True)
class AggregateReport:
    se_status: SEMode = SEMode.DISABLED
    facilities: List[str] = field(default_factory=list)
    feature_indications: List[str] = field(default_factory=list)
    supported_plaintext_add_secret_flags: List[str] = field(default_factory=list)
    supported_add_secret_request_versions: List[str] = field(default_factory=list)
    supported_attestation_request_versions: List[str] = field(default_factory=list)
    supported_plaintext_control_flags: List[str] = field(default_factory=list)
    supported_se_header_versions: List[str] = field(default_factory=list)
    supported_plaintext_attestation_flags: List[str] = field(default_factory=list)
    supported_secret_types: List[str] = field(default_factory=list)
    limits: Limits = field(default_factory=Limits)

    def sections(self) -> List[Section]:
        return [make_section(key, getattr(self, key)) for key in REPORT_KEYS]

    def as_document(self) -> Dict[str, Any]:
        return to_document(self.sections())


def to_document(sections: Sequence[Section]) -> Dict[str, Any]:
    return {section.key: section.document_value() for section in sections}


def render_text(sections: Sequence[Section]) -> List[str]:
    """One heading line per section followed by its entries; sections are separated by an empty line."""
    out = []
    for index, section in enumerate(sections):
        if index:
            out.append('')
        out.append(section.heading)
        out.extend(section.lines())
    return out


def render_yaml(sections: Sequence[Section]) -> str:
    return yaml.safe_dump(to_document(sections), sort_keys=False, default_flow_style=False)


def render_json(sections: Sequence[Section]) -> str:
    return json.dumps(to_document(sections), sort_keys=False, indent=2, separators=(',', ': '))


def render(sections: Sequence[Section], fmt: str = 'text') -> List[str]:
    """Renders sections in the requested format as a list of output lines."""
    if fmt == 'yaml':
        return render_yaml(sections).splitlines()
    if fmt == 'json':
        return render_json(sections).splitlines()
    return render_text(sections)
