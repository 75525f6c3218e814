"""Registration functions for ModelConventions.

These functions are the usual way to put a single-node convention into a
rule list: they wrap it in the matching traversal adapter and append the
adapter at the end of the list.

    conventions = []
    add_action_convention(conventions, RequireHttpsConvention())
    add_parameter_convention(conventions, bind_ids_from_route)

The rule list is only ever appended to. Registering the same convention
twice registers it twice.
"""

import logging
from typing import Any, MutableSequence

from .core.adapters import (
    ActionApplicationModelConvention,
    ControllerApplicationModelConvention,
    ParameterApplicationModelConvention,
)
from .core.conventions import (
    ActionModelConvention,
    ApplicationModelConvention,
    ControllerModelConvention,
    ParameterModelConvention,
)
from .errors import require

logger = logging.getLogger(__name__)

ConventionList = MutableSequence[ApplicationModelConvention]


def add_controller_convention(
    conventions: ConventionList,
    controller_convention: ControllerModelConvention
) -> None:
    """Add a controller convention that applies to every controller.

    Args:
        conventions: Rule list to append to
        controller_convention: Convention to apply to each controller

    Raises:
        InvalidArgumentError: If either argument is None. The rule list
            is left untouched.
    """
    require(conventions, 'conventions')
    require(controller_convention, 'controller_convention')

    _append(conventions, ControllerApplicationModelConvention(controller_convention))


def add_action_convention(
    conventions: ConventionList,
    action_convention: ActionModelConvention
) -> None:
    """Add an action convention that applies to every action.

    Args:
        conventions: Rule list to append to
        action_convention: Convention to apply to each action

    Raises:
        InvalidArgumentError: If either argument is None. The rule list
            is left untouched.
    """
    require(conventions, 'conventions')
    require(action_convention, 'action_convention')

    _append(conventions, ActionApplicationModelConvention(action_convention))


def add_parameter_convention(
    conventions: ConventionList,
    parameter_convention: ParameterModelConvention
) -> None:
    """Add a parameter convention that applies to every parameter.

    Args:
        conventions: Rule list to append to
        parameter_convention: Convention to apply to each parameter

    Raises:
        InvalidArgumentError: If either argument is None. The rule list
            is left untouched.
    """
    require(conventions, 'conventions')
    require(parameter_convention, 'parameter_convention')

    _append(conventions, ParameterApplicationModelConvention(parameter_convention))


# Dispatch table for add_convention, checked in this order
_REGISTRARS = (
    (ControllerModelConvention, add_controller_convention),
    (ActionModelConvention, add_action_convention),
    (ParameterModelConvention, add_parameter_convention),
)


def add_convention(conventions: ConventionList, convention: Any) -> None:
    """Add a convention of any kind, choosing the registration by its type.

    Single-node conventions are wrapped in their traversal adapter.
    An ApplicationModelConvention is appended as it is.

    Args:
        conventions: Rule list to append to
        convention: Controller, action, parameter or application convention

    Raises:
        InvalidArgumentError: If either argument is None
        TypeError: If the convention implements none of the convention
            interfaces, or more than one of them
    """
    require(conventions, 'conventions')
    require(convention, 'convention')

    matches = [
        registrar for interface, registrar in _REGISTRARS
        if isinstance(convention, interface)
    ]
    if isinstance(convention, ApplicationModelConvention):
        matches.append(_append)

    if not matches:
        raise TypeError(
            f"{type(convention).__name__} is not a model convention. "
            f"Subclass one of: ApplicationModelConvention, ControllerModelConvention, "
            f"ActionModelConvention, ParameterModelConvention"
        )
    if len(matches) > 1:
        raise TypeError(
            f"{type(convention).__name__} implements more than one convention "
            f"interface; register it with the add_*_convention function for "
            f"the level it should apply to"
        )

    matches[0](conventions, convention)


def _append(conventions: ConventionList, convention: ApplicationModelConvention) -> None:
    conventions.append(convention)
    logger.debug("Registered %r (%d convention(s) total)", convention, len(conventions))
