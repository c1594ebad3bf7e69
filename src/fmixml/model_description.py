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
Data structures describing the contents of an FMI 2.0 modelDescription.xml.

All records are immutable; list valued fields are stored as tuples. Records
compare field by field with ==, so a record holding a NaN float (e.g. a Real
start="NaN") is not equal to the result of a second parse of the same document.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

DEFAULT_VARIABLE_NAMING_CONVENTION = "flat"

# ==== Enumerations used in the module ==== #

class Causality(Enum):
    PARAMETER = "parameter"
    CALCULATED_PARAMETER = "calculatedParameter"
    INPUT = "input"
    OUTPUT = "output"
    LOCAL = "local"
    INDEPENDENT = "independent"
    UNSPECIFIED = ""

class Variability(Enum):
    CONSTANT = "constant"
    FIXED = "fixed"
    TUNABLE = "tunable"
    DISCRETE = "discrete"
    CONTINUOUS = "continuous"
    UNSPECIFIED = ""

class Initial(Enum):
    EXACT = "exact"
    APPROX = "approx"
    CALCULATED = "calculated"
    UNSPECIFIED = ""

class VariableType(Enum):
    """Fundamental type of a ScalarVariable, named as its XML element."""
    REAL = "Real"
    INTEGER = "Integer"
    BOOLEAN = "Boolean"
    STRING = "String"
    ENUMERATION = "Enumeration"

#=======================================================================

@dataclass(frozen=True)
class DefaultExperiment:
    start_time: Optional[float] = None
    stop_time: Optional[float] = None
    step_size: Optional[float] = None
    tolerance: Optional[float] = None

@dataclass(frozen=True)
class SourceFile:
    name: str

@dataclass(frozen=True)
class FmuAttributes:
    """
    Attributes shared by the CoSimulation and ModelExchange elements.
    """
    model_identifier: str
    needs_execution_tool: bool = False
    can_get_and_set_fmu_state: bool = False
    can_serialize_fmu_state: bool = False
    provides_directional_derivative: bool = False
    can_not_use_memory_management_functions: bool = False
    can_be_instantiated_only_once_per_process: bool = False
    source_files: Tuple[SourceFile, ...] = ()

@dataclass(frozen=True)
class CoSimulationAttributes(FmuAttributes):
    max_output_derivative_order: int = 0
    can_interpolate_inputs: bool = False
    # Spelled as the XML attribute canRunAsynchronuously
    can_run_asynchronuously: bool = False
    can_handle_variable_communication_step_size: bool = False

@dataclass(frozen=True)
class ModelExchangeAttributes(FmuAttributes):
    completed_integrator_step_not_needed: bool = False

# ==== ModelStructure ==== #

@dataclass(frozen=True)
class Unknown:
    """
    An entry of Outputs, Derivatives or InitialUnknowns.

    index is the 1-based position of the variable in ModelVariables.
    dependencies and dependencies_kind are None when the attribute is not
    set, which is different from an empty dependency list.
    """
    index: int
    dependencies: Optional[Tuple[int, ...]] = None
    dependencies_kind: Optional[Tuple[str, ...]] = None

@dataclass(frozen=True)
class ModelStructure:
    outputs: Tuple[Unknown, ...] = ()
    derivatives: Tuple[Unknown, ...] = ()
    initial_unknowns: Tuple[Unknown, ...] = ()

# ==== ScalarVariable ==== #

@dataclass(frozen=True)
class ScalarVariableAttribute:
    start: Optional[object] = None
    declared_type: Optional[str] = None

@dataclass(frozen=True)
class BoundedScalarVariableAttribute(ScalarVariableAttribute):
    min: Optional[object] = None
    max: Optional[object] = None
    quantity: Optional[str] = None

@dataclass(frozen=True)
class IntegerAttribute(BoundedScalarVariableAttribute):
    start: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None

@dataclass(frozen=True)
class EnumerationAttribute(BoundedScalarVariableAttribute):
    start: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None

@dataclass(frozen=True)
class RealAttribute(BoundedScalarVariableAttribute):
    start: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    nominal: Optional[float] = None
    unit: Optional[str] = None
    # 1-based index of the variable this is the derivative of
    derivative: Optional[int] = None
    reinit: bool = False
    unbounded: bool = False
    relative_quantity: bool = False

@dataclass(frozen=True)
class StringAttribute(ScalarVariableAttribute):
    start: Optional[str] = None

@dataclass(frozen=True)
class BooleanAttribute(ScalarVariableAttribute):
    start: Optional[bool] = None

TypedAttribute = Union[IntegerAttribute, RealAttribute, StringAttribute,
                       BooleanAttribute, EnumerationAttribute]

_ATTRIBUTE_TYPES = {
    RealAttribute: VariableType.REAL,
    IntegerAttribute: VariableType.INTEGER,
    BooleanAttribute: VariableType.BOOLEAN,
    StringAttribute: VariableType.STRING,
    EnumerationAttribute: VariableType.ENUMERATION,
}

@dataclass(frozen=True)
class ScalarVariableBase:
    name: str
    value_reference: int
    description: str = ""
    can_handle_multiple_set_per_time_instant: bool = False
    causality: Causality = Causality.UNSPECIFIED
    variability: Variability = Variability.UNSPECIFIED
    initial: Initial = Initial.UNSPECIFIED

@dataclass(frozen=True)
class ScalarVariable:
    """
    A ScalarVariable element: the common attributes in base and exactly one
    typed attribute record (Real, Integer, Boolean, String or Enumeration).
    """
    base: ScalarVariableBase
    attribute: TypedAttribute

    def __post_init__(self):
        if type(self.attribute) not in _ATTRIBUTE_TYPES:
            raise TypeError("Unknown type for variable %s: %r"
                            % (self.base.name, self.attribute))

    @property
    def name(self):
        return self.base.name

    @property
    def value_reference(self):
        return self.base.value_reference

    @property
    def description(self):
        return self.base.description

    @property
    def causality(self):
        return self.base.causality

    @property
    def variability(self):
        return self.base.variability

    @property
    def initial(self):
        return self.base.initial

    @property
    def can_handle_multiple_set_per_time_instant(self):
        return self.base.can_handle_multiple_set_per_time_instant

    @property
    def start(self):
        return self.attribute.start

    @property
    def type(self):
        """
        The fundamental type as VariableType.
        """
        return _ATTRIBUTE_TYPES[type(self.attribute)]

    @property
    def is_real(self):
        return self.type is VariableType.REAL

    @property
    def is_integer(self):
        return self.type is VariableType.INTEGER

    @property
    def is_boolean(self):
        return self.type is VariableType.BOOLEAN

    @property
    def is_string(self):
        return self.type is VariableType.STRING

    @property
    def is_enumeration(self):
        return self.type is VariableType.ENUMERATION

@dataclass(frozen=True)
class ModelVariables:
    """
    The ScalarVariables of a model in document order.
    """
    variables: Tuple[ScalarVariable, ...] = ()

    def __len__(self):
        return len(self.variables)

    def __iter__(self):
        return iter(self.variables)

    def __getitem__(self, i):
        return self.variables[i]

    def get_by_name(self, name):
        """
        Get the variable with the given name.

        Exceptions::

            KeyError --
                If no variable has that name.
        """
        for variable in self.variables:
            if variable.name == name:
                return variable
        raise KeyError("The variable %s could not be found." % name)

    def get_by_value_reference(self, value_reference, type):
        """
        Get the variables of the given VariableType sharing a value
        reference. Aliases share value references, so several variables may
        be returned.

        Returns::

            A list of ScalarVariable.
        """
        return [v for v in self.variables
                if v.value_reference == value_reference and v.type is type]

    def filter(self, type=None, causality=None, variability=None):
        """
        Get the variables matching all of the given criteria. A criterion set
        to None matches every variable.

        Parameters::

            type --
                A VariableType.
                Default: None

            causality --
                A Causality.
                Default: None

            variability --
                A Variability.
                Default: None

        Returns::

            A list of ScalarVariable in document order.
        """
        return [v for v in self.variables
                if (type is None or v.type is type)
                and (causality is None or v.causality is causality)
                and (variability is None or v.variability is variability)]

    def get_variable_names(self, type=None, causality=None, variability=None):
        return [v.name for v in self.filter(type, causality, variability)]

# ==== ModelDescription ==== #

@dataclass(frozen=True)
class ModelDescriptionBase:
    guid: str
    fmi_version: str
    model_name: str
    description: str = ""
    author: str = ""
    version: str = ""
    license: str = ""
    copyright: str = ""
    generation_tool: str = ""
    generation_date_and_time: str = ""
    number_of_event_indicators: int = 0
    variable_naming_convention: str = DEFAULT_VARIABLE_NAMING_CONVENTION
    model_variables: ModelVariables = field(default_factory=ModelVariables)
    model_structure: ModelStructure = field(default_factory=ModelStructure)
    default_experiment: Optional[DefaultExperiment] = None

@dataclass(frozen=True)
class ModelDescription(ModelDescriptionBase):
    """
    The contents of an fmiModelDescription element. Either of co_simulation
    and model_exchange is None when the model does not provide that
    interface.
    """
    co_simulation: Optional[CoSimulationAttributes] = None
    model_exchange: Optional[ModelExchangeAttributes] = None

    @property
    def supports_co_simulation(self):
        return self.co_simulation is not None

    @property
    def supports_model_exchange(self):
        return self.model_exchange is not None

    @property
    def number_of_continuous_states(self):
        return len(self.model_structure.derivatives)

    def get_value_reference(self, variable_name):
        """
        Get the value reference of a variable.

        Exceptions::

            KeyError --
                If no variable has that name.
        """
        return self.model_variables.get_by_name(variable_name).value_reference

    def get_unknown_variable(self, unknown):
        """
        Get the ScalarVariable an Unknown refers to.

        Exceptions::

            IndexError --
                If the index of unknown is outside ModelVariables.
        """
        return self._get_variable(unknown.index)

    def _get_variable(self, index):
        # index is 1-based
        if not 1 <= index <= len(self.model_variables):
            raise IndexError("Variable index %d is outside ModelVariables (%d variables)."
                             % (index, len(self.model_variables)))
        return self.model_variables[index - 1]

    def get_state_variables(self):
        """
        Get the continuous states, i.e. the variables whose derivatives are
        listed under ModelStructure/Derivatives, in the order of Derivatives.

        Returns::

            A list of ScalarVariable.
        """
        states = []
        for unknown in self.model_structure.derivatives:
            derivative = self.get_unknown_variable(unknown)
            if not derivative.is_real or derivative.attribute.derivative is None:
                raise ValueError("The variable %s listed in Derivatives has no derivative attribute."
                                 % derivative.name)
            states.append(self._get_variable(derivative.attribute.derivative))
        return states
