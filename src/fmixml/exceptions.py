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

# This file contains the various exceptions classes used in FMIXML

class ModelDescriptionException(Exception):
    """
    A modelDescription exception.
    """
    pass

class IOException(ModelDescriptionException):
    """
        Exception covering issues related to reading the XML source.
    """
    pass

class InvalidXMLException(ModelDescriptionException):
    """
    Exception covering XML input that is not well-formed.
    """
    pass

class MissingRootException(ModelDescriptionException):
    """
    Exception raised when the document is not rooted at fmiModelDescription.
    """
    pass

class AttributeException(ModelDescriptionException):
    """
    Base class for errors tied to a single attribute of an XML element.

    Attributes::

        element --
            Tag name of the element carrying the attribute.

        attribute --
            Name of the attribute.

        sourceline --
            Line of the element in the document (None if unknown).
    """
    def __init__(self, element, attribute, sourceline=None):
        self.element = element
        self.attribute = attribute
        self.sourceline = sourceline
        super().__init__(self._message())

    def _location(self):
        if self.sourceline is None:
            return "<%s>" % self.element
        return "<%s> (line %d)" % (self.element, self.sourceline)

    def _message(self):
        raise NotImplementedError

class MissingAttributeException(AttributeException):
    """
    Exception raised when a required attribute is absent.
    """
    def _message(self):
        return "Missing required attribute '%s' on element %s." % (
            self.attribute, self._location())

class MalformedAttributeException(AttributeException):
    """
    Exception raised when an attribute value can not be converted to the
    expected type.
    """
    def __init__(self, element, attribute, value, sourceline=None):
        self.value = value
        super().__init__(element, attribute, sourceline)

    def _message(self):
        return "Malformed value '%s' for attribute '%s' on element %s." % (
            self.value, self.attribute, self._location())

class InvalidScalarVariableException(ModelDescriptionException):
    """
    Exception raised when a ScalarVariable has no Real, Integer, Boolean,
    String or Enumeration child.
    """
    def __init__(self, name, sourceline=None):
        self.name = name
        self.sourceline = sourceline
        msg = "ScalarVariable: %s does not have a valid fundamental type." % name
        if sourceline is not None:
            msg += " (line %d)" % sourceline
        super().__init__(msg)
