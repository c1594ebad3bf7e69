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
Translation of an FMI 2.0 modelDescription.xml element tree into the records
of fmixml.model_description.
"""

import logging

from fmixml.common.xmlparser import (required, optional, with_default,
                                     xml_bool, xml_float, xml_int, xml_uint,
                                     xml_size, xml_string, local_name,
                                     child_elements, parse_dependencies,
                                     parse_dependencies_kind, parse_XML,
                                     parse_XML_string)
from fmixml.exceptions import (MalformedAttributeException, MissingRootException,
                               InvalidScalarVariableException)
from fmixml.model_description import (DEFAULT_VARIABLE_NAMING_CONVENTION,
                                      Causality, Variability, Initial,
                                      DefaultExperiment, SourceFile,
                                      FmuAttributes, CoSimulationAttributes,
                                      ModelExchangeAttributes, Unknown,
                                      ModelStructure, IntegerAttribute,
                                      RealAttribute, StringAttribute,
                                      BooleanAttribute, EnumerationAttribute,
                                      ScalarVariableBase, ScalarVariable,
                                      ModelVariables, ModelDescription)

logger = logging.getLogger(__name__)

ROOT_ELEMENT = 'fmiModelDescription'

# ==== Internal helper functions ====#

def _enum_attribute(element, name, enum):
    """
    Read an enumeration attribute; absent and empty both give UNSPECIFIED.
    """
    value = element.get(name, '')
    try:
        return enum(value)
    except ValueError as detail:
        raise MalformedAttributeException(local_name(element), name, value,
                                          element.sourceline) from detail

def _parse_default_experiment(element):
    return DefaultExperiment(
        start_time=optional(element, 'startTime', xml_float),
        stop_time=optional(element, 'stopTime', xml_float),
        step_size=optional(element, 'stepSize', xml_float),
        tolerance=optional(element, 'tolerance', xml_float))

def _parse_source_files(element):
    return tuple(SourceFile(required(e_file, 'name'))
                 for e_file in child_elements(element)
                 if local_name(e_file) == 'File')

def _parse_unknown(element):
    index = required(element, 'index', xml_uint)
    if index < 1:
        raise MalformedAttributeException(local_name(element), 'index',
                                          element.get('index'), element.sourceline)

    dependencies = optional(element, 'dependencies')
    if dependencies is not None:
        dependencies = parse_dependencies(dependencies)

    dependencies_kind = optional(element, 'dependenciesKind')
    if dependencies_kind is not None:
        dependencies_kind = parse_dependencies_kind(dependencies_kind)

    return Unknown(index, dependencies, dependencies_kind)

def _parse_unknowns(element):
    return tuple(_parse_unknown(e_unknown)
                 for e_unknown in child_elements(element)
                 if local_name(e_unknown) == 'Unknown')

def _parse_model_structure(element):
    sections = {'Outputs': (), 'Derivatives': (), 'InitialUnknowns': ()}
    for e_section in child_elements(element):
        tag = local_name(e_section)
        if tag in sections:
            sections[tag] = sections[tag] + _parse_unknowns(e_section)
    return ModelStructure(outputs=sections['Outputs'],
                          derivatives=sections['Derivatives'],
                          initial_unknowns=sections['InitialUnknowns'])

def _fmu_attributes(element):
    """
    Keyword arguments for the FmuAttributes part of CoSimulation and
    ModelExchange.
    """
    source_files = ()
    for child in child_elements(element):
        if local_name(child) == 'SourceFiles':
            source_files = source_files + _parse_source_files(child)

    return dict(
        model_identifier=required(element, 'modelIdentifier'),
        needs_execution_tool=with_default(element, 'needsExecutionTool', xml_bool, False),
        can_get_and_set_fmu_state=with_default(element, 'canGetAndSetFMUstate', xml_bool, False),
        can_serialize_fmu_state=with_default(element, 'canSerializeFMUstate', xml_bool, False),
        provides_directional_derivative=with_default(
            element, 'providesDirectionalDerivative', xml_bool, False),
        can_not_use_memory_management_functions=with_default(
            element, 'canNotUseMemoryManagementFunctions', xml_bool, False),
        can_be_instantiated_only_once_per_process=with_default(
            element, 'canBeInstantiatedOnlyOncePerProcess', xml_bool, False),
        source_files=source_files)

def parse_fmu_attributes(element):
    """
    Translate the attributes common to CoSimulation and ModelExchange.
    """
    return FmuAttributes(**_fmu_attributes(element))

def _parse_co_simulation(element):
    return CoSimulationAttributes(
        max_output_derivative_order=with_default(
            element, 'maxOutputDerivativeOrder', xml_uint, 0),
        can_interpolate_inputs=with_default(element, 'canInterpolateInputs', xml_bool, False),
        can_run_asynchronuously=with_default(element, 'canRunAsynchronuously', xml_bool, False),
        can_handle_variable_communication_step_size=with_default(
            element, 'canHandleVariableCommunicationStepSize', xml_bool, False),
        **_fmu_attributes(element))

def _parse_model_exchange(element):
    return ModelExchangeAttributes(
        completed_integrator_step_not_needed=with_default(
            element, 'completedIntegratorStepNotNeeded', xml_bool, False),
        **_fmu_attributes(element))

# ==== ScalarVariable ==== #

def _scalar_attributes(element, convert):
    return dict(start=optional(element, 'start', convert),
                declared_type=optional(element, 'declaredType'))

def _bounded_attributes(element, convert):
    attributes = _scalar_attributes(element, convert)
    attributes.update(min=optional(element, 'min', convert),
                      max=optional(element, 'max', convert),
                      quantity=optional(element, 'quantity'))
    return attributes

def _parse_integer(element):
    return IntegerAttribute(**_bounded_attributes(element, xml_int))

def _parse_enumeration(element):
    return EnumerationAttribute(**_bounded_attributes(element, xml_int))

def _parse_real(element):
    return RealAttribute(
        nominal=optional(element, 'nominal', xml_float),
        unit=optional(element, 'unit'),
        derivative=optional(element, 'derivative', xml_uint),
        reinit=with_default(element, 'reinit', xml_bool, False),
        unbounded=with_default(element, 'unbounded', xml_bool, False),
        relative_quantity=with_default(element, 'relativeQuantity', xml_bool, False),
        **_bounded_attributes(element, xml_float))

def _parse_string(element):
    return StringAttribute(**_scalar_attributes(element, xml_string))

def _parse_boolean(element):
    return BooleanAttribute(**_scalar_attributes(element, xml_bool))

TYPE_PARSERS = {
    'Integer': _parse_integer,
    'Real': _parse_real,
    'String': _parse_string,
    'Boolean': _parse_boolean,
    'Enumeration': _parse_enumeration,
}

def _parse_scalar_variable_base(element):
    multiple_set = element.get('canHandleMultipleSetPerTimeInstant')
    if multiple_set is None:
        # Misspelt form found in some generated files
        name = 'canHandleMultipleSetPerTimelnstant'
    else:
        name = 'canHandleMultipleSetPerTimeInstant'

    return ScalarVariableBase(
        name=required(element, 'name'),
        value_reference=required(element, 'valueReference', xml_uint),
        description=with_default(element, 'description', xml_string, ""),
        can_handle_multiple_set_per_time_instant=with_default(element, name, xml_bool, False),
        causality=_enum_attribute(element, 'causality', Causality),
        variability=_enum_attribute(element, 'variability', Variability),
        initial=_enum_attribute(element, 'initial', Initial))

def parse_scalar_variable(element):
    """
    Translate a ScalarVariable element.

    The first child named Real, Integer, Boolean, String or Enumeration
    decides the type of the variable.

    Exceptions::

        InvalidScalarVariableException --
            If no such child exists.
    """
    base = _parse_scalar_variable_base(element)

    e_types = [child for child in child_elements(element)
               if local_name(child) in TYPE_PARSERS]
    if not e_types:
        raise InvalidScalarVariableException(base.name, element.sourceline)
    if len(e_types) > 1:
        logger.warning("ScalarVariable %s has %d type elements, using <%s>.",
                       base.name, len(e_types), local_name(e_types[0]))

    e_type = e_types[0]
    return ScalarVariable(base, TYPE_PARSERS[local_name(e_type)](e_type))

def _parse_model_variables(element):
    return ModelVariables(tuple(parse_scalar_variable(e_variable)
                                for e_variable in child_elements(element)
                                if local_name(e_variable) == 'ScalarVariable'))

# ==== Root ==== #

def parse_element_tree(element_tree):
    """
    Build a ModelDescription from a parsed lxml ElementTree.

    Exceptions::

        MissingRootException --
            If the root element is not fmiModelDescription.

        MissingAttributeException, MalformedAttributeException,
        InvalidScalarVariableException --
            On invalid content.
    """
    root = element_tree.getroot()
    if root is None or local_name(root) != ROOT_ELEMENT:
        raise MissingRootException("The XML document has no %s root element." % ROOT_ELEMENT)

    # model (root) attributes
    attributes = dict(
        guid=required(root, 'guid'),
        fmi_version=required(root, 'fmiVersion'),
        model_name=required(root, 'modelName'),
        description=with_default(root, 'description', xml_string, ""),
        author=with_default(root, 'author', xml_string, ""),
        version=with_default(root, 'version', xml_string, ""),
        license=with_default(root, 'license', xml_string, ""),
        copyright=with_default(root, 'copyright', xml_string, ""),
        generation_tool=with_default(root, 'generationTool', xml_string, ""),
        generation_date_and_time=with_default(root, 'generationDateAndTime', xml_string, ""),
        number_of_event_indicators=with_default(root, 'numberOfEventIndicators', xml_size, 0),
        variable_naming_convention=with_default(root, 'variableNamingConvention', xml_string,
                                                DEFAULT_VARIABLE_NAMING_CONVENTION))

    for child in child_elements(root):
        tag = local_name(child)
        if tag == 'CoSimulation':
            attributes['co_simulation'] = _parse_co_simulation(child)
        elif tag == 'ModelExchange':
            attributes['model_exchange'] = _parse_model_exchange(child)
        elif tag == 'DefaultExperiment':
            attributes['default_experiment'] = _parse_default_experiment(child)
        elif tag == 'ModelVariables':
            attributes['model_variables'] = _parse_model_variables(child)
        elif tag == 'ModelStructure':
            attributes['model_structure'] = _parse_model_structure(child)
        else:
            logger.debug("Ignoring element <%s> in %s.", tag, ROOT_ELEMENT)

    return ModelDescription(**attributes)

def parse_model_description(source):
    """
    Parse an FMI 2.0 modelDescription.xml.

    Parameters::

        source --
            Path (str or os.PathLike) of the XML file or an open binary
            file-like object. Streams are not closed.

    Exceptions::

        IOException --
            If the source can not be read.

        InvalidXMLException --
            If the document is not well-formed.

        MissingRootException, MissingAttributeException,
        MalformedAttributeException, InvalidScalarVariableException --
            On invalid content, see parse_element_tree.

    Returns::

        A ModelDescription.

    Example::

        md = parse_model_description('BouncingBall/modelDescription.xml')
        md.model_name
    """
    logger.debug("Parsing model description from %s.", getattr(source, 'name', source))
    md = parse_element_tree(parse_XML(source))
    logger.debug("Parsed model description of %s with %d variables.",
                 md.model_name, len(md.model_variables))
    return md

def parse_model_description_string(text):
    """
    Parse an FMI 2.0 modelDescription held in memory as bytes or str.

    Returns::

        A ModelDescription.
    """
    return parse_element_tree(parse_XML_string(text))
