"""
Pytest configuration file that ensures the src directory is in the Python path.
This allows 'import cmddispatch' to work without installing the package.
"""
import io
import logging
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add the src directory to Python path so we can import the package
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    """Console that writes plain text into an in-memory buffer."""
    return Console(file=buffer, width=200, color_system=None)


@pytest.fixture
def restore_logging():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
