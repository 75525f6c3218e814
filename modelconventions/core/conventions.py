"""Convention interfaces for ModelConventions.

A convention is a rule that customizes the application model in place.
There are four kinds, one per level of the tree:

- ApplicationModelConvention sees the whole ApplicationModel once.
  This is the only kind a rule list holds.
- ControllerModelConvention, ActionModelConvention and
  ParameterModelConvention each see a single node. They reach a rule list
  through the traversal adapters in ``core.adapters``.

The Function* classes let a plain callable stand in for a subclass.
"""

from abc import ABC, abstractmethod
from typing import Callable

from ..errors import require
from .model import ActionModel, ApplicationModel, ControllerModel, ParameterModel


class ApplicationModelConvention(ABC):
    """Convention applied once to the whole application model."""

    @abstractmethod
    def apply(self, application: ApplicationModel) -> None:
        """Customize the application model in place.

        Args:
            application: Root of the model tree
        """
        pass


class ControllerModelConvention(ABC):
    """Convention applied to a single controller."""

    @abstractmethod
    def apply(self, controller: ControllerModel) -> None:
        """Customize one controller in place."""
        pass


class ActionModelConvention(ABC):
    """Convention applied to a single action."""

    @abstractmethod
    def apply(self, action: ActionModel) -> None:
        """Customize one action in place."""
        pass


class ParameterModelConvention(ABC):
    """Convention applied to a single parameter."""

    @abstractmethod
    def apply(self, parameter: ParameterModel) -> None:
        """Customize one parameter in place."""
        pass


class FunctionControllerConvention(ControllerModelConvention):
    """Controller convention backed by a callable.

    Allows custom controller rules without subclassing.
    """

    def __init__(self, func: Callable[[ControllerModel], None]):
        """Initialize with a function.

        Args:
            func: Function(controller) -> None
        """
        self.func = require(func, 'func')

    def apply(self, controller: ControllerModel) -> None:
        self.func(controller)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({_callable_name(self.func)})"


class FunctionActionConvention(ActionModelConvention):
    """Action convention backed by a callable."""

    def __init__(self, func: Callable[[ActionModel], None]):
        self.func = require(func, 'func')

    def apply(self, action: ActionModel) -> None:
        self.func(action)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({_callable_name(self.func)})"


class FunctionParameterConvention(ParameterModelConvention):
    """Parameter convention backed by a callable."""

    def __init__(self, func: Callable[[ParameterModel], None]):
        self.func = require(func, 'func')

    def apply(self, parameter: ParameterModel) -> None:
        self.func(parameter)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({_callable_name(self.func)})"


# Decorator forms, e.g.
#
#     @parameter_convention
#     def bind_ids_from_route(parameter):
#         ...

def controller_convention(func: Callable[[ControllerModel], None]) -> FunctionControllerConvention:
    """Turn a function into a ControllerModelConvention."""
    return FunctionControllerConvention(func)


def action_convention(func: Callable[[ActionModel], None]) -> FunctionActionConvention:
    """Turn a function into an ActionModelConvention."""
    return FunctionActionConvention(func)


def parameter_convention(func: Callable[[ParameterModel], None]) -> FunctionParameterConvention:
    """Turn a function into a ParameterModelConvention."""
    return FunctionParameterConvention(func)


def _callable_name(func) -> str:
    return getattr(func, '__qualname__', None) or repr(func)
