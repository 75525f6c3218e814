"""Traversal adapters for ModelConventions.

An adapter turns a convention written for one level of the model tree into
an ApplicationModelConvention. Applied to an ApplicationModel, it walks down
to its level and hands every node there to the wrapped convention, in tree
order. The tree has a fixed depth, so each adapter spells out its loops
instead of using a generic walker.

Errors raised by the wrapped convention are not caught. Traversal stops at
the failing node and nodes already visited keep whatever the convention did
to them.
"""

import logging

from ..errors import require
from .conventions import (
    ActionModelConvention,
    ApplicationModelConvention,
    ControllerModelConvention,
    ParameterModelConvention,
)
from .model import ApplicationModel

logger = logging.getLogger(__name__)


class ControllerApplicationModelConvention(ApplicationModelConvention):
    """Applies a ControllerModelConvention to every controller."""

    def __init__(self, controller_convention: ControllerModelConvention):
        """Initialize adapter with the convention to lift.

        Args:
            controller_convention: Convention invoked once per controller

        Raises:
            InvalidArgumentError: If controller_convention is None
        """
        self._controller_convention = require(controller_convention, 'controller_convention')

    @property
    def convention(self) -> ControllerModelConvention:
        """The wrapped controller convention."""
        return self._controller_convention

    def apply(self, application: ApplicationModel) -> None:
        require(application, 'application')

        visited = 0
        for controller in application.controllers:
            self._controller_convention.apply(controller)
            visited += 1

        logger.debug("%r visited %d controller(s)", self, visited)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._controller_convention!r})"


class ActionApplicationModelConvention(ApplicationModelConvention):
    """Applies an ActionModelConvention to every action.

    Actions are visited controller by controller, and in declaration order
    within each controller.
    """

    def __init__(self, action_convention: ActionModelConvention):
        """Initialize adapter with the convention to lift.

        Args:
            action_convention: Convention invoked once per action

        Raises:
            InvalidArgumentError: If action_convention is None
        """
        self._action_convention = require(action_convention, 'action_convention')

    @property
    def convention(self) -> ActionModelConvention:
        """The wrapped action convention."""
        return self._action_convention

    def apply(self, application: ApplicationModel) -> None:
        require(application, 'application')

        visited = 0
        for controller in application.controllers:
            for action in controller.actions:
                self._action_convention.apply(action)
                visited += 1

        logger.debug("%r visited %d action(s)", self, visited)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._action_convention!r})"


class ParameterApplicationModelConvention(ApplicationModelConvention):
    """Applies a ParameterModelConvention to every parameter.

    Visiting order is lexicographic over (controller, action, parameter)
    position. Controllers without actions and actions without parameters
    contribute nothing.
    """

    def __init__(self, parameter_convention: ParameterModelConvention):
        """Initialize adapter with the convention to lift.

        Args:
            parameter_convention: Convention invoked once per parameter

        Raises:
            InvalidArgumentError: If parameter_convention is None
        """
        self._parameter_convention = require(parameter_convention, 'parameter_convention')

    @property
    def convention(self) -> ParameterModelConvention:
        """The wrapped parameter convention."""
        return self._parameter_convention

    def apply(self, application: ApplicationModel) -> None:
        require(application, 'application')

        visited = 0
        for controller in application.controllers:
            for action in controller.actions:
                for parameter in action.parameters:
                    self._parameter_convention.apply(parameter)
                    visited += 1

        logger.debug("%r visited %d parameter(s)", self, visited)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._parameter_convention!r})"
