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
Show Secure Execution information, one option per category

>>> pvinfo [info] [--se-status] [--facilities] [--feature-indications]
                  [--supported-plaintext-add-secret-flags] [--supported-add-secret-request-versions]
                  [--supported-attestation-request-versions] [--supported-plaintext-control-flags]
                  [--supported-se-header-versions] [--supported-plaintext-attestation-flags]
                  [--supported-secret-types] [--limits] [-f {text,yaml,json}]

Without an option every category and the limits are shown.

Examples:

>>> pvinfo
>>> pvinfo --facilities --limits
>>> pvinfo -f yaml
"""

from argparse import ArgumentParser

from pvinfo.command import BaseCommand
from pvinfo.library.report import REPORT_KEYS

SELECTOR_HELP = {
    'se_status': 'Show the Secure Execution mode',
    'facilities': 'Show the installed Ultravisor calls',
    'feature_indications': 'Show the Ultravisor features',
    'supported_plaintext_add_secret_flags': 'Show the supported plaintext add secret flags',
    'supported_add_secret_request_versions': 'Show the supported add secret request versions',
    'supported_attestation_request_versions': 'Show the supported attestation request versions',
    'supported_plaintext_control_flags': 'Show the supported plaintext control flags',
    'supported_se_header_versions': 'Show the supported SE header versions',
    'supported_plaintext_attestation_flags': 'Show the supported plaintext attestation flags',
    'supported_secret_types': 'Show the supported secret types',
    'limits': 'Show the Secure Execution limits',
}


class InfoCommand(BaseCommand):

    def parse_arguments(self) -> None:
        parser = ArgumentParser(prog='pvinfo info', usage=__doc__)
        for key in REPORT_KEYS:
            parser.add_argument(f'--{key.replace("_", "-")}', dest=key, action='store_true', help=SELECTOR_HELP[key])
        self.add_format_argument(parser)
        parser.set_defaults(func=self.info)
        parser.parse_args(self.argv, namespace=self)

    def selected_keys(self):
        return [key for key in REPORT_KEYS if getattr(self, key, False)]

    def info(self) -> None:
        keys = self.selected_keys()
        if keys:
            self.show(self.sections(keys))
        else:
            self.show(self.uv.collect_all().sections())


commands = {'info': InfoCommand}
