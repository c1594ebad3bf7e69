#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2026 Modelon AB
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import os

from setuptools import setup

NAME = "FMIXML"
AUTHOR = "Modelon AB"
AUTHOR_EMAIL = ""
VERSION = "1.0.0"
LICENSE = "LGPL"
DESCRIPTION = "A package for reading modelDescription.xml files of FMI 2.0 Functional Mock-Up Units."
PLATFORMS = ["Linux", "Windows", "MacOS X"]
CLASSIFIERS = [ 'Programming Language :: Python',
                'Programming Language :: Python :: 3',
                'Operating System :: MacOS :: MacOS X',
                'Operating System :: Microsoft :: Windows',
                'Operating System :: Unix']

LONG_DESCRIPTION = """
FMIXML reads the modelDescription.xml of Functional Mock-Up Units (FMUs)
compliant with the Functional Mock-Up Interface (FMI) 2.0, see
https://www.fmi-standard.org/ for more information, into immutable Python
records: model identity, Co-Simulation and Model Exchange capabilities,
scalar variables with their typed attributes, the model structure and the
default experiment.

Requirements:
-------------
- `Python 3.9 or newer`_
- `lxml <https://pypi.org/project/lxml/>`_
- `numpy <https://pypi.org/project/numpy/>`_

Usage:
------

    from fmixml import parse_model_description
    md = parse_model_description("modelDescription.xml")
"""

INSTALL_REQUIRES = [
    'lxml>=4.6',
    'numpy>=1.19',
]

EXTRAS_REQUIRE = {
    'tests': ['pytest>=7.0'],
}

setup(name=NAME,
      version=VERSION,
      license=LICENSE,
      description=DESCRIPTION,
      long_description=LONG_DESCRIPTION,
      author=AUTHOR,
      author_email=AUTHOR_EMAIL,
      platforms=PLATFORMS,
      classifiers=CLASSIFIERS,
      python_requires=">=3.9",
      install_requires=INSTALL_REQUIRES,
      extras_require=EXTRAS_REQUIRE,
      package_dir = {'fmixml':        os.path.join('src', 'fmixml'),
                     'fmixml.common': os.path.join('src', 'fmixml', 'common')},
      packages=[
        'fmixml',
        'fmixml.common',
      ],
      )
