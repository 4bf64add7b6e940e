"""
Playground kernel test configuration.

Shared fixtures: an in-memory example store, the default registry built on
it, and a runner that transpiles and executes a bare program.
"""

from __future__ import annotations

import pytest

from playground.kernel.registry import default_registry_source
from playground.kernel.sandbox import Sandbox
from playground.kernel.store import MemoryExampleStore
from playground.kernel.transpiler import transpile

BUTTON_EXAMPLE = """import React from 'react'
import { Button } from 'semantic-ui-react'

const ButtonExampleButton = () => <Button>Click Here</Button>

export default ButtonExampleButton
"""


@pytest.fixture
def store():
    return MemoryExampleStore(
        sources={"elements/Button/Types/ButtonExampleButton": BUTTON_EXAMPLE},
        commons={"elements/Button": {"colors": ["red", "green"]}},
    )


@pytest.fixture
def registry_source(store):
    return default_registry_source(store)


@pytest.fixture
def run_js():
    """Transpile and execute a program; return the value of its last expression."""
    sandbox = Sandbox()

    def run(text, scope=None):
        return sandbox.evaluate(transpile(text), scope or {})

    return run
