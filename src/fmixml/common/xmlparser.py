# -*- coding: utf-8 -*-

#    Copyright (C) 2026 Modelon AB
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Lesser General Public License as published by
#    the Free Software Foundation, version 3 of the License.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Lesser General Public License for more details.
#
#    You should have received a copy of the GNU Lesser General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""
Module containing the XML loading and attribute coercion helpers used by the
modelDescription translators. Attribute values are read from lxml elements and
converted to Python values following the FMI 2.0 XML lexical rules.
"""
import os
import re
import logging

from lxml import etree
import numpy as N

from fmixml.exceptions import (IOException, InvalidXMLException,
                               MissingAttributeException,
                               MalformedAttributeException)

logger = logging.getLogger(__name__)

int32 = N.iinfo(N.int32)
uint32 = N.iinfo(N.uint32)
uint64 = N.iinfo(N.uint64)

_signed_pattern = re.compile(r"^[-+]?[0-9]+$")
_unsigned_pattern = re.compile(r"^\+?[0-9]+$")
_dependency_pattern = re.compile(r"\s*([0-9]+)")
_double_pattern = re.compile(r"^[-+]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][-+]?[0-9]+)?$|^-?INF$|^NaN$")
_declaration_pattern = re.compile(r"^\s*<\?xml[^>]*\?>")

#=======================================================================

# ==== Value converters ====#

def xml_string(value):
    return value

def xml_bool(value):
    """
    Translate the xs:boolean literals 'true', 'false', '1' and '0' to bool.
    """
    if value == 'true' or value == '1':
        return True
    elif value == 'false' or value == '0':
        return False
    raise ValueError("The xml boolean " + str(value) + " does not have a valid value.")

def xml_float(value):
    """xs:double, including INF, -INF and NaN."""
    if not _double_pattern.match(value.strip()):
        raise ValueError("Not a floating point number: " + str(value))
    return float(value)

def _ranged_int(value, pattern, info):
    if not pattern.match(value.strip()):
        raise ValueError("Not an integer: " + str(value))
    result = int(value)
    if result < info.min or result > info.max:
        raise ValueError("Integer %s out of range [%d, %d]" % (value, info.min, info.max))
    return result

def xml_int(value):
    """Signed 32-bit integer (fmi2Integer)."""
    return _ranged_int(value, _signed_pattern, int32)

def xml_uint(value):
    """Unsigned 32-bit integer (fmi2ValueReference, indices)."""
    return _ranged_int(value, _unsigned_pattern, uint32)

def xml_size(value):
    """Unsigned 64-bit integer (counts)."""
    return _ranged_int(value, _unsigned_pattern, uint64)

# ==== Attribute access ====#

def local_name(element):
    """
    Return the tag of element without any namespace part.
    """
    return etree.QName(element).localname

def child_elements(element):
    """
    Iterate over the element children of element in document order, skipping
    comments and processing instructions.
    """
    for child in element:
        if isinstance(child.tag, str):
            yield child

def _convert(element, name, value, convert):
    try:
        return convert(value)
    except ValueError as detail:
        raise MalformedAttributeException(local_name(element), name, value,
                                          element.sourceline) from detail

def required(element, name, convert=xml_string):
    """
    Read a required attribute.

    Parameters::

        element --
            The lxml element.

        name --
            The attribute name.

        convert --
            Function converting the attribute string.
            Default: xml_string

    Exceptions::

        MissingAttributeException --
            If the attribute is not set.

        MalformedAttributeException --
            If convert fails on the attribute value.

    Returns::

        The converted attribute value.
    """
    value = element.get(name)
    if value is None:
        raise MissingAttributeException(local_name(element), name, element.sourceline)
    return _convert(element, name, value, convert)

def optional(element, name, convert=xml_string):
    """
    Read an optional attribute, None if it is not set.
    """
    value = element.get(name)
    if value is None:
        return None
    return _convert(element, name, value, convert)

def with_default(element, name, convert, default):
    """
    Read an optional attribute, default if it is not set.
    """
    value = element.get(name)
    if value is None:
        return default
    return _convert(element, name, value, convert)

# ==== List valued attributes ====#

def parse_dependencies(text):
    """
    Parse a list of unsigned integers separated by single commas or spaces,
    e.g. '1,2 3,4'. Extraction stops silently at the first token that is not
    an integer.

    Returns::

        A tuple of ints.
    """
    values = []
    pos = 0
    while True:
        match = _dependency_pattern.match(text, pos)
        if match is None:
            break
        values.append(int(match.group(1)))
        pos = match.end()
        if pos < len(text) and text[pos] in ', ':
            pos += 1
    if text[pos:].strip():
        logger.warning("Ignoring unparsable dependencies after position %d in '%s'.", pos, text)
    return tuple(values)

def parse_dependencies_kind(text):
    """
    Split a whitespace separated list of dependency kinds.
    """
    return tuple(text.split())

# ==== Document loading ====#

def create_xml_parser():
    """
    Create the lxml parser used for modelDescription documents.
    """
    return etree.XMLParser(remove_comments=True, remove_pis=True,
                           resolve_entities=False, no_network=True)

def parse_XML(source):
    """
    Parse an XML document.

    Parameters::

        source --
            Path (str or os.PathLike) of the XML file or a binary file-like
            object.

    Exceptions::

        IOException --
            If the source can not be read.

        InvalidXMLException --
            If the document is not well-formed.

    Returns::

        A reference to the ElementTree object containing the parsed XML.
    """
    if isinstance(source, (str, bytes, os.PathLike)):
        try:
            with open(source, 'rb') as stream:
                return _parse_stream(stream, os.fsdecode(source))
        except OSError as detail:
            raise IOException("The XML file: %s could not be read. %s"
                              % (os.fsdecode(source), detail)) from detail
    name = getattr(source, 'name', '<stream>')
    try:
        return _parse_stream(source, name)
    except OSError as detail:
        raise IOException("The XML stream: %s could not be read. %s"
                          % (name, detail)) from detail

def parse_XML_string(text):
    """
    Parse an XML document held in memory as bytes or str.

    A str is already decoded, so its XML declaration is dropped and the
    encoding it names is not applied again.
    """
    if isinstance(text, str):
        text = _declaration_pattern.sub('', text, count=1).encode('utf-8')
    try:
        return etree.ElementTree(etree.fromstring(text, create_xml_parser()))
    except etree.XMLSyntaxError as detail:
        raise InvalidXMLException("The XML document is not well-formed. %s" % detail) from detail
    except ValueError as detail:
        raise InvalidXMLException("The XML document could not be parsed. %s" % detail) from detail

def _parse_stream(stream, name):
    try:
        return etree.parse(stream, create_xml_parser())
    except etree.XMLSyntaxError as detail:
        raise InvalidXMLException("The XML file: %s is not well-formed. %s"
                                  % (name, detail)) from detail
