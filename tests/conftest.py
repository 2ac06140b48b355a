import os

import pytest

from statstar.model.stats import StatValues

# Qt tests never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def zero_stats() -> StatValues:
    return StatValues.zero()


@pytest.fixture
def even_stats() -> StatValues:
    """Every arm at half length (10 of 20 points)."""
    return StatValues(physical=10, mental=10, social=10, creative=10, productive=10)
