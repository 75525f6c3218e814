"""Test fixtures for ModelConventions consumers.

These helpers make it easy to build small model trees and to observe which
nodes a convention was applied to, and in what order.
"""

from typing import Any, List, Mapping, Optional, Sequence, Type

from ..core.conventions import (
    ActionModelConvention,
    ControllerModelConvention,
    ParameterModelConvention,
)
from ..core.model import ApplicationModel


def build_application(layout: Mapping[str, Mapping[str, Sequence[str]]]) -> ApplicationModel:
    """Build an ApplicationModel from a nested mapping.

    Mapping order becomes tree order.

    Example:
        app = build_application({
            'Orders': {'Get': ['id'], 'List': ['page', 'size']},
            'Health': {'Ping': []},
        })

    Args:
        layout: {controller name: {action name: [parameter names]}}

    Returns:
        A fully linked ApplicationModel
    """
    application = ApplicationModel()
    for controller_name, actions in layout.items():
        controller = application.add_controller(controller_name)
        for action_name, parameters in actions.items():
            action = controller.add_action(action_name)
            for parameter_name in parameters:
                action.add_parameter(parameter_name)
    return application


class RecordingConvention(ControllerModelConvention,
                          ActionModelConvention,
                          ParameterModelConvention):
    """Convention that records the identifier of every node it is applied to.

    Implements all three single-node interfaces, so the same instance can be
    registered at any level with the explicit add_*_convention functions.

    Example:
        recorder = RecordingConvention()
        add_action_convention(conventions, recorder)
        apply_conventions(app, conventions)
        assert recorder.visited == ['Orders.Get', 'Orders.List']
    """

    def __init__(self):
        self.visited: List[str] = []
        self.nodes: List[Any] = []

    def apply(self, node) -> None:
        self.visited.append(node.identifier())
        self.nodes.append(node)

    @property
    def call_count(self) -> int:
        return len(self.visited)

    def reset(self) -> None:
        """Forget everything recorded so far."""
        self.visited.clear()
        self.nodes.clear()


class FailingConvention(RecordingConvention):
    """Recording convention that raises when it reaches a given node.

    The failing node is not recorded; nodes before it are.

    Args:
        fail_on: Identifier of the node to fail on
        error_type: Exception class to raise (default RuntimeError)
    """

    def __init__(self, fail_on: str, error_type: Optional[Type[Exception]] = None):
        super().__init__()
        self.fail_on = fail_on
        self.error_type = error_type or RuntimeError
        self.raised: Optional[Exception] = None

    def apply(self, node) -> None:
        if node.identifier() == self.fail_on:
            self.raised = self.error_type(f"convention failed on {self.fail_on}")
            raise self.raised
        super().apply(node)
