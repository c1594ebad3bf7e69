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
"""
The FMIXML Python package for reading FMI 2.0 modelDescription.xml files.
"""

__all__ = ['common', 'exceptions', 'model_description', 'parser']

__version__ = "1.0.0"

# Allow users to type: from fmixml import parse_model_description
from fmixml.parser import parse_model_description, parse_model_description_string
from fmixml.model_description import (ModelDescription, ModelVariables, ModelStructure,
                                      ScalarVariable, Unknown, Causality, Variability,
                                      Initial, VariableType)
from fmixml.exceptions import ModelDescriptionException
