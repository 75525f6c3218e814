#!/usr/bin/env python3
"""
Basic conventions example for ModelConventions.

This example demonstrates:
- Building a small application model
- Registering conventions at controller, action and parameter level
- Applying the rule list and inspecting the result
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from modelconventions import (
    ConventionOptions,
    ControllerModelConvention,
    action_convention,
    parameter_convention,
)
from modelconventions.testing import build_application


class RoutePrefixConvention(ControllerModelConvention):
    """Give every controller a route prefix derived from its name."""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def apply(self, controller):
        controller.route_values['prefix'] = f"{self.prefix}/{controller.name.lower()}"


@action_convention
def lowercase_action_routes(action):
    action.route_values['action'] = action.name.lower()


@parameter_convention
def bind_ids_from_route(parameter):
    if parameter.name == 'id':
        parameter.binding_source = 'route'
    elif parameter.binding_source is None:
        parameter.binding_source = 'query'


def main():
    if '-v' in sys.argv:
        logging.basicConfig(level=logging.DEBUG)

    application = build_application({
        'Orders': {'Get': ['id'], 'List': ['page', 'size']},
        'Users': {'Find': ['id', 'name']},
    })

    options = ConventionOptions()
    options.add_controller_convention(RoutePrefixConvention('api'))
    options.add_action_convention(lowercase_action_routes)
    options.add_parameter_convention(bind_ids_from_route)

    errors = options.validate()
    if errors:
        print("Invalid conventions:", "; ".join(errors))
        return 1

    options.apply(application)

    for controller in application.controllers:
        print(f"{controller.name}  {controller.route_values['prefix']}")
        for action in controller.actions:
            print(f"  {action.route_values['action']}")
            for parameter in action.parameters:
                print(f"    {parameter.name} <- {parameter.binding_source}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
