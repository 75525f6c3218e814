#!/usr/bin/env python3
"""
Test the README snippet and the bundled example to ensure they work correctly.
"""

import importlib.util
from pathlib import Path
import sys

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from modelconventions import ParameterModelConvention, add_parameter_convention, apply_conventions
from modelconventions.testing import build_application


EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def test_readme_quick_start():
    """Test the BindIdsFromRoute snippet from README.md."""

    class BindIdsFromRoute(ParameterModelConvention):
        def apply(self, parameter):
            if parameter.name == "id":
                parameter.binding_source = "route"

    application = build_application({'Orders': {'Get': ['id', 'expand']}})

    conventions = []
    add_parameter_convention(conventions, BindIdsFromRoute())
    apply_conventions(application, conventions)

    parameters = application.controllers[0].actions[0].parameters
    assert [p.binding_source for p in parameters] == ['route', None]


def test_basic_conventions_example(capsys, monkeypatch):
    """Run examples/basic_conventions.py and check its output."""
    spec = importlib.util.spec_from_file_location(
        "basic_conventions", EXAMPLES_DIR / "basic_conventions.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(sys, 'argv', ['basic_conventions.py'])

    assert module.main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[:5] == [
        "Orders  api/orders",
        "  get",
        "    id <- route",
        "  list",
        "    page <- query",
    ]
    assert "Users  api/users" in lines
