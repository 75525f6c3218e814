"""Core abstractions for ModelConventions.

This package contains the model tree, the convention interfaces and the
traversal adapters that lift single-node conventions to the whole tree.
"""

from .model import ApplicationModel, ControllerModel, ActionModel, ParameterModel
from .conventions import (
    ApplicationModelConvention,
    ControllerModelConvention,
    ActionModelConvention,
    ParameterModelConvention,
    FunctionControllerConvention,
    FunctionActionConvention,
    FunctionParameterConvention,
    controller_convention,
    action_convention,
    parameter_convention,
)
from .adapters import (
    ControllerApplicationModelConvention,
    ActionApplicationModelConvention,
    ParameterApplicationModelConvention,
)

__all__ = [
    "ApplicationModel",
    "ControllerModel",
    "ActionModel",
    "ParameterModel",
    "ApplicationModelConvention",
    "ControllerModelConvention",
    "ActionModelConvention",
    "ParameterModelConvention",
    "FunctionControllerConvention",
    "FunctionActionConvention",
    "FunctionParameterConvention",
    "controller_convention",
    "action_convention",
    "parameter_convention",
    "ControllerApplicationModelConvention",
    "ActionApplicationModelConvention",
    "ParameterApplicationModelConvention",
]
