"""Configuration for ModelConventions.

ConventionOptions is the container a host keeps its rule list in. It is a
thin dataclass: the registration functions and apply_conventions() do the
work, the options object just saves passing the list around.
"""

from dataclasses import dataclass, field
from typing import Any, List

from .api import apply_conventions
from .core.conventions import (
    ActionModelConvention,
    ApplicationModelConvention,
    ControllerModelConvention,
    ParameterModelConvention,
)
from .core.model import ApplicationModel
from . import registration


@dataclass
class ConventionOptions:
    """Options holding the ordered rule list.

    Insertion order is execution order.
    """

    conventions: List[ApplicationModelConvention] = field(default_factory=list)

    def add_controller_convention(self, controller_convention: ControllerModelConvention) -> None:
        """Register a convention for every controller."""
        registration.add_controller_convention(self.conventions, controller_convention)

    def add_action_convention(self, action_convention: ActionModelConvention) -> None:
        """Register a convention for every action."""
        registration.add_action_convention(self.conventions, action_convention)

    def add_parameter_convention(self, parameter_convention: ParameterModelConvention) -> None:
        """Register a convention for every parameter."""
        registration.add_parameter_convention(self.conventions, parameter_convention)

    def add_convention(self, convention: Any) -> None:
        """Register a convention of any kind (see registration.add_convention)."""
        registration.add_convention(self.conventions, convention)

    def apply(self, application: ApplicationModel) -> None:
        """Run the rule list against an application model."""
        apply_conventions(application, self.conventions)

    def validate(self) -> List[str]:
        """Validate the rule list.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.conventions is None:
            errors.append("conventions cannot be None")
            return errors

        for index, convention in enumerate(self.conventions):
            if convention is None:
                errors.append(f"conventions[{index}] is None")
            elif not callable(getattr(convention, 'apply', None)):
                errors.append(
                    f"conventions[{index}] ({type(convention).__name__}) "
                    f"has no callable apply()"
                )

        return errors
