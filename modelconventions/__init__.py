"""ModelConventions - customization rules for application model trees.

An application model is a fixed three-level tree: controllers, their
actions, and the actions' parameters. A convention is a small rule that
customizes part of that tree. You write it for the one level you care about,
and ModelConventions takes care of applying it everywhere.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from modelconventions import add_parameter_convention, apply_conventions

    conventions = []
    add_parameter_convention(conventions, BindIdsFromRoute())
    apply_conventions(application, conventions)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.model import ApplicationModel, ControllerModel, ActionModel, ParameterModel
from .core.conventions import (
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
from .core.adapters import (
    ControllerApplicationModelConvention,
    ActionApplicationModelConvention,
    ParameterApplicationModelConvention,
)

# Errors
from .errors import ModelConventionError, InvalidArgumentError

# Registration and high-level API
from .registration import (
    add_controller_convention,
    add_action_convention,
    add_parameter_convention,
    add_convention,
)
from .api import apply_conventions

# Configuration
from .config import ConventionOptions

__all__ = [
    "__version__",
    # Model
    "ApplicationModel",
    "ControllerModel",
    "ActionModel",
    "ParameterModel",
    # Conventions
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
    # Adapters
    "ControllerApplicationModelConvention",
    "ActionApplicationModelConvention",
    "ParameterApplicationModelConvention",
    # Errors
    "ModelConventionError",
    "InvalidArgumentError",
    # API
    "add_controller_convention",
    "add_action_convention",
    "add_parameter_convention",
    "add_convention",
    "apply_conventions",
    "ConventionOptions",
]
