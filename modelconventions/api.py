"""High-level API for ModelConventions.

Hosts that keep their own rule list can run it with apply_conventions().
When and how often to call it is up to the host.
"""

import logging
from typing import Iterable

from .core.conventions import ApplicationModelConvention
from .core.model import ApplicationModel
from .errors import require

logger = logging.getLogger(__name__)


def apply_conventions(
    application: ApplicationModel,
    conventions: Iterable[ApplicationModelConvention]
) -> None:
    """Apply every convention in the rule list to the application model.

    Conventions run in list order. The list is copied first, so conventions
    added while this runs wait for the next call. The first error raised by
    a convention stops the run and propagates unchanged.

    Args:
        application: Model tree to customize
        conventions: Rule list of application-wide conventions

    Raises:
        InvalidArgumentError: If either argument is None

    Example:
        >>> conventions = []
        >>> add_action_convention(conventions, RequireHttpsConvention())
        >>> apply_conventions(application, conventions)
    """
    require(application, 'application')
    require(conventions, 'conventions')

    snapshot = list(conventions)
    for convention in snapshot:
        convention.apply(application)

    logger.debug("Applied %d convention(s)", len(snapshot))
