"""Application model tree for ModelConventions.

The tree has a fixed shape: an ApplicationModel holds controllers, each
controller holds actions, and each action holds parameters. Every child
collection is an ordinary list whose order is the order conventions see.

These classes are deliberately plain containers. The host that builds the
tree owns it and may mutate any attribute; conventions are the usual place
where that happens.
"""

from typing import Any, Dict, List, Optional


class ApplicationModel:
    """Root of the model tree.

    Attributes:
        controllers: Ordered list of ControllerModel
        properties: Free-form data shared by conventions
    """

    def __init__(self, controllers: Optional[List['ControllerModel']] = None):
        self.controllers: List[ControllerModel] = []
        self.properties: Dict[str, Any] = {}
        for controller in controllers or []:
            self._adopt(controller)

    def add_controller(self, name: str) -> 'ControllerModel':
        """Append a new controller and return it."""
        return self._adopt(ControllerModel(name))

    def _adopt(self, controller: 'ControllerModel') -> 'ControllerModel':
        controller.application = self
        self.controllers.append(controller)
        return controller

    def metadata(self) -> Dict[str, Any]:
        return {
            'type': 'application',
            'controllers': len(self.controllers),
        }

    def __repr__(self) -> str:
        return f"ApplicationModel(controllers={len(self.controllers)})"


class ControllerModel:
    """A group of related actions.

    Attributes:
        name: Controller name, unique within the application by convention
        actions: Ordered list of ActionModel
        properties: Free-form data for conventions
        route_values: Route tokens contributed by this controller
        application: Owning ApplicationModel (None while detached)
    """

    def __init__(self, name: str, actions: Optional[List['ActionModel']] = None):
        self.name = name
        self.actions: List[ActionModel] = []
        self.properties: Dict[str, Any] = {}
        self.route_values: Dict[str, str] = {}
        self.application: Optional[ApplicationModel] = None
        for action in actions or []:
            self._adopt(action)

    def add_action(self, name: str) -> 'ActionModel':
        """Append a new action and return it."""
        return self._adopt(ActionModel(name))

    def _adopt(self, action: 'ActionModel') -> 'ActionModel':
        action.controller = self
        self.actions.append(action)
        return action

    def identifier(self) -> str:
        """Return the controller name."""
        return self.name

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': 'controller',
            'actions': len(self.actions),
        }

    def __repr__(self) -> str:
        return f"ControllerModel(name={self.name!r})"


class ActionModel:
    """A single operation exposed by a controller.

    Attributes:
        name: Action name
        parameters: Ordered list of ParameterModel
        properties: Free-form data for conventions
        route_values: Route tokens contributed by this action
        controller: Owning ControllerModel (None while detached)
    """

    def __init__(self, name: str, parameters: Optional[List['ParameterModel']] = None):
        self.name = name
        self.parameters: List[ParameterModel] = []
        self.properties: Dict[str, Any] = {}
        self.route_values: Dict[str, str] = {}
        self.controller: Optional[ControllerModel] = None
        for parameter in parameters or []:
            self._adopt(parameter)

    def add_parameter(self, name: str, binding_source: Optional[str] = None) -> 'ParameterModel':
        """Append a new parameter and return it."""
        return self._adopt(ParameterModel(name, binding_source=binding_source))

    def _adopt(self, parameter: 'ParameterModel') -> 'ParameterModel':
        parameter.action = self
        self.parameters.append(parameter)
        return parameter

    def identifier(self) -> str:
        """Return 'Controller.action', or just the action name when detached."""
        if self.controller is None:
            return self.name
        return f"{self.controller.identifier()}.{self.name}"

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': 'action',
            'parameters': len(self.parameters),
        }

    def __repr__(self) -> str:
        return f"ActionModel(id={self.identifier()!r})"


class ParameterModel:
    """One input of an action.

    Attributes:
        name: Parameter name
        binding_source: Where the value is bound from (query, body, ...),
            None when not yet decided
        properties: Free-form data for conventions
        action: Owning ActionModel (None while detached)
    """

    def __init__(self, name: str, binding_source: Optional[str] = None):
        self.name = name
        self.binding_source = binding_source
        self.properties: Dict[str, Any] = {}
        self.action: Optional[ActionModel] = None

    def identifier(self) -> str:
        if self.action is None:
            return self.name
        return f"{self.action.identifier()}.{self.name}"

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': 'parameter',
            'binding_source': self.binding_source,
        }

    def __repr__(self) -> str:
        return f"ParameterModel(id={self.identifier()!r})"
