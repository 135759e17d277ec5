"""
Pytest configuration and shared fixtures for path editor tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from PyQt6.QtCore import QCoreApplication

from models.drawing import Drawing, Element
from models.geometry import GridSize, Point
from services.editor_session import EditorSession
from services.settings_manager import SettingsManager, reset_settings_manager


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="path_editor_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


# ============== Model Fixtures ==============

@pytest.fixture
def empty_drawing() -> Drawing:
    """Create an empty drawing with the default 50x50 grid."""
    return Drawing()


@pytest.fixture
def free_drawing() -> Drawing:
    """Create an empty drawing without a grid."""
    return Drawing(grid=None)


@pytest.fixture
def smooth_element() -> Element:
    """A smooth point at (100, 0) with its outgoing handle at (50, 20)."""
    return Element(anchor=Point(100, 0), secondary_control_point=Point(50, 20))


@pytest.fixture
def curve_drawing() -> Drawing:
    """
    Three points, the middle one smooth.

    A(0, 0) corner, B(100, 0) with outgoing handle (150, 50), C(200, 0) corner.
    """
    drawing = Drawing(grid=None)
    drawing.elements = [
        Element(anchor=Point(0, 0)),
        Element(anchor=Point(100, 0), secondary_control_point=Point(150, 50)),
        Element(anchor=Point(200, 0)),
    ]
    return drawing


# ============== Session Fixtures ==============

@pytest.fixture(scope="session")
def qapp():
    """Qt core application shared by all tests that need signals."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def session(qapp) -> EditorSession:
    """Editor session over an empty, grid-free drawing."""
    return EditorSession(Drawing(grid=None))


@pytest.fixture
def grid_session(qapp) -> EditorSession:
    """Editor session over an empty drawing with a 50x50 grid."""
    return EditorSession(Drawing(grid=GridSize(50, 50)))


# ============== Settings Fixtures ==============

@pytest.fixture
def settings_manager(temp_dir: Path) -> Generator[SettingsManager, None, None]:
    """Settings manager writing to a temporary file."""
    reset_settings_manager()
    yield SettingsManager(config_override=str(temp_dir / "settings.json"))
    reset_settings_manager()


# ============== Helper Functions ==============

def assert_valid_python(code: str, filename: str = "test.py"):
    """Assert that code is valid Python syntax."""
    try:
        compile(code, filename, 'exec')
    except SyntaxError as e:
        pytest.fail(f"Invalid Python syntax at line {e.lineno}: {e.msg}\n{code}")


def assert_contains_all(text: str, substrings: list[str]):
    """Assert that text contains all substrings."""
    for s in substrings:
        assert s in text, f"Expected '{s}' in text"


def assert_integral(point: Point):
    """Assert that both coordinates are whole numbers."""
    assert point.x == int(point.x), f"x={point.x} is not integral"
    assert point.y == int(point.y), f"y={point.y} is not integral"
