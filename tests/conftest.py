import os
import sys

import pytest

# Make the project importable without installing it
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from tests.stubs import StubCanvas


@pytest.fixture
def stub_factory():
    """Canvas factory producing recording stub canvases; keeps them in `.created`."""
    created = []

    def factory(width, height):
        canvas = StubCanvas(width, height)
        created.append(canvas)
        return canvas

    factory.created = created
    return factory
