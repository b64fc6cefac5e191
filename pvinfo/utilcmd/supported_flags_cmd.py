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
Show the flags and versions supported for secrets, attestation and SE headers

>>> pvinfo supported-flags [--secret] [--attestation] [--header] [-f {text,yaml,json}]

Without an option all three groups are shown.

Examples:

>>> pvinfo supported-flags
>>> pvinfo supported-flags --secret
>>> pvinfo supported-flags --attestation --header
"""

from argparse import ArgumentParser

from pvinfo.command import BaseCommand

FLAG_GROUPS = {
    'secret': ('supported_secret_types',
               'supported_add_secret_request_versions',
               'supported_plaintext_add_secret_flags'),
    'attestation': ('supported_plaintext_attestation_flags',
                    'supported_attestation_request_versions'),
    'header': ('supported_se_header_versions',
               'supported_plaintext_control_flags'),
}


class SupportedFlagsCommand(BaseCommand):

    def parse_arguments(self) -> None:
        parser = ArgumentParser(prog='pvinfo supported-flags', usage=__doc__)
        parser.add_argument('--secret', action='store_true', help='Show secret types, add secret request versions and flags')
        parser.add_argument('--attestation', action='store_true', help='Show attestation flags and request versions')
        parser.add_argument('--header', action='store_true', help='Show SE header versions and plaintext control flags')
        self.add_format_argument(parser)
        parser.set_defaults(func=self.supported_flags)
        parser.parse_args(self.argv, namespace=self)

    def selected_keys(self):
        groups = [group for group in FLAG_GROUPS if getattr(self, group, False)]
        if not groups:
            groups = list(FLAG_GROUPS)
        return [key for group in groups for key in FLAG_GROUPS[group]]

    def supported_flags(self) -> None:
        self.show(self.sections(self.selected_keys()))


commands = {'supported-flags': SupportedFlagsCommand}
