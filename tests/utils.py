#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2026 Modelon AB
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

from fmixml import parse_model_description_string

ROOT_ATTRIBUTES = {'fmiVersion': '2.0', 'modelName': 'M', 'guid': '{g}'}

def model_description_xml(body='', **attributes):
    """
    Wrap body in an fmiModelDescription element. Keyword arguments override
    the root attributes, None removes one.
    """
    root_attributes = dict(ROOT_ATTRIBUTES)
    root_attributes.update(attributes)
    attrs = ' '.join('%s="%s"' % (k, v) for k, v in root_attributes.items() if v is not None)
    return '<fmiModelDescription %s>%s</fmiModelDescription>' % (attrs, body)

def parse_body(body='', **attributes):
    """Parse body wrapped by model_description_xml."""
    return parse_model_description_string(model_description_xml(body, **attributes))

def variable_xml(type_element, name='x', valueReference='1', **attributes):
    """A ScalarVariable element around type_element."""
    attributes.update(name=name, valueReference=valueReference)
    attrs = ' '.join('%s="%s"' % (k, v) for k, v in attributes.items())
    return '<ModelVariables><ScalarVariable %s>%s</ScalarVariable></ModelVariables>' % (attrs, type_element)
