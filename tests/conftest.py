import inspect
import sys

import pytest


@pytest.fixture
def shallow_recursion():
    """Caps the interpreter stack a few dozen frames above the test itself."""
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(len(inspect.stack(0)) + 80)
    try:
        yield
    finally:
        sys.setrecursionlimit(limit)
