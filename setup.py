#!/usr/bin/env python3
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
Setup module to install pvinfo package via setuptools
"""

import os
from setuptools import setup, find_packages, __version__ as _sutver

if _sutver and int(_sutver.split('.')[0]) < 62:
    raise RuntimeError("Setuptools version must be greater than 62.0.0. Please upgrade using 'pip install setuptools --upgrade'")


def long_description():
    with open('README') as readme:
        return readme.read()


def version():
    with open(os.path.join('pvinfo', 'VERSION')) as version_file:
        return version_file.read().strip()


package_data = {
    'pvinfo': ['*VERSION*', 'options/*.ini', 'descriptions/*.txt'],
}
install_requires = ['PyYAML']

setup(
    name='pvinfo',
    version=version(),
    description='PVINFO: Protected Virtualization (Secure Execution) Information Tool',
    author='PVINFO Team',
    license='GNU General Public License v2 (GPLv2)',
    platforms=['Linux'],
    long_description=long_description(),

    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Console',
        'License :: OSI Approved :: GNU General Public License v2 (GPLv2)',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Security',
        'Topic :: System :: Hardware'
    ],

    packages=find_packages(exclude=['tests.*', 'tests']),
    package_data=package_data,
    install_requires=install_requires,
    python_requires='>=3.7',

    py_modules=['pvinfo_util'],
    entry_points={
        'console_scripts': [
            'pvinfo=pvinfo_util:main',
        ],
    },
    test_suite='tests',
)
