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

# Testing attribute coercion and XML loading

import io
import math
import logging

import pytest
from lxml import etree

from fmixml.common.xmlparser import (xml_bool, xml_int, xml_uint, xml_size, xml_float,
                                     required, optional, with_default, local_name,
                                     child_elements, parse_dependencies,
                                     parse_dependencies_kind, parse_XML, parse_XML_string)
from fmixml.exceptions import (MissingAttributeException, MalformedAttributeException,
                               IOException, InvalidXMLException)


class TestConverters:
    @pytest.mark.parametrize("text, value", [("true", True), ("1", True),
                                             ("false", False), ("0", False)])
    def test_xml_bool(self, text, value):
        """Test the four boolean literals."""
        assert xml_bool(text) is value

    @pytest.mark.parametrize("text", ["True", "FALSE", "yes", "", "2"])
    def test_xml_bool_invalid(self, text):
        """Boolean literals are case sensitive."""
        with pytest.raises(ValueError):
            xml_bool(text)

    def test_xml_int_range(self):
        """Test the signed 32-bit limits."""
        assert xml_int("-2147483648") == -2147483648
        assert xml_int("+2147483647") == 2147483647
        with pytest.raises(ValueError):
            xml_int("2147483648")
        with pytest.raises(ValueError):
            xml_int("1.5")

    def test_xml_uint_range(self):
        """Test the unsigned 32-bit limits."""
        assert xml_uint("4294967295") == 4294967295
        with pytest.raises(ValueError):
            xml_uint("4294967296")
        with pytest.raises(ValueError):
            xml_uint("-1")

    def test_xml_size(self):
        assert xml_size("4294967296") == 4294967296

    def test_xml_float(self):
        assert xml_float("1e-6") == 1e-6
        with pytest.raises(ValueError):
            xml_float("one")

    @pytest.mark.parametrize("text, value", [("1", 1.0), ("-.5", -0.5), ("2.", 2.0),
                                             ("+1.5E3", 1500.0), ("INF", float("inf")),
                                             ("-INF", float("-inf"))])
    def test_xml_float_lexical_forms(self, text, value):
        """Test the xs:double lexical forms."""
        assert xml_float(text) == value

    def test_xml_float_nan(self):
        assert math.isnan(xml_float("NaN"))

    @pytest.mark.parametrize("text", ["1_0", "infinity", "inf", "+nan", "nan", "+INF", "", "1e", "0x10"])
    def test_xml_float_invalid(self, text):
        """Python float literals that are not xs:double are rejected."""
        with pytest.raises(ValueError):
            xml_float(text)


class TestAttributeAccess:
    @classmethod
    def setup_class(cls):
        cls.element = etree.fromstring('<Real start="0.5" reinit="maybe"/>')

    def test_required(self):
        assert required(self.element, 'start', xml_float) == 0.5

    def test_required_missing(self):
        """Test that the exception carries element and attribute."""
        with pytest.raises(MissingAttributeException) as e:
            required(self.element, 'nominal', xml_float)
        assert e.value.element == 'Real'
        assert e.value.attribute == 'nominal'
        assert e.value.sourceline == 1

    def test_malformed(self):
        """Test that the exception carries the offending value."""
        with pytest.raises(MalformedAttributeException) as e:
            with_default(self.element, 'reinit', xml_bool, False)
        assert e.value.element == 'Real'
        assert e.value.attribute == 'reinit'
        assert e.value.value == 'maybe'
        assert "maybe" in str(e.value)

    def test_optional(self):
        assert optional(self.element, 'start', xml_float) == 0.5
        assert optional(self.element, 'min', xml_float) is None

    def test_with_default(self):
        assert with_default(self.element, 'unbounded', xml_bool, False) is False

    def test_local_name_and_children(self):
        """Namespaces are dropped and comments skipped."""
        element = etree.fromstring('<a xmlns="urn:x"><!-- c --><b/><c/></a>')
        assert local_name(element) == 'a'
        assert [local_name(child) for child in child_elements(element)] == ['b', 'c']


class TestDependencies:
    @pytest.mark.parametrize("text, value", [
        ("1,2 3,4", (1, 2, 3, 4)),
        ("1 2", (1, 2)),
        ("", ()),
        ("7", (7,)),
        ("  1  2", (1, 2)),
        ("1,2,", (1, 2)),
    ])
    def test_parse_dependencies(self, text, value):
        assert parse_dependencies(text) == value

    def test_parse_dependencies_garbage(self, caplog):
        """Extraction stops at the first token that is not an integer."""
        caplog.set_level(logging.WARNING)
        assert parse_dependencies("1,2,x,4") == (1, 2)
        assert "unparsable dependencies" in caplog.text

    def test_parse_dependencies_double_separator(self):
        assert parse_dependencies("1,,2") == (1,)

    @pytest.mark.parametrize("text, value", [
        ("fixed tunable constant", ("fixed", "tunable", "constant")),
        ("fixed   tunable", ("fixed", "tunable")),
        ("", ()),
        ("  ", ()),
    ])
    def test_parse_dependencies_kind(self, text, value):
        assert parse_dependencies_kind(text) == value


class TestLoading:
    def test_missing_file(self, tmp_path):
        with pytest.raises(IOException):
            parse_XML(tmp_path / "does_not_exist.xml")

    def test_not_well_formed_file(self, xml_dir):
        with pytest.raises(InvalidXMLException):
            parse_XML(xml_dir / "NotWellFormed.xml")

    def test_stream(self):
        """Streams are parsed and left open."""
        stream = io.BytesIO(b'<a><b/></a>')
        tree = parse_XML(stream)
        assert tree.getroot().tag == 'a'
        assert not stream.closed

    def test_string(self):
        assert parse_XML_string('<?xml version="1.0" encoding="UTF-8"?><a/>').getroot().tag == 'a'

    def test_string_not_well_formed(self):
        with pytest.raises(InvalidXMLException):
            parse_XML_string(b'<a>')
