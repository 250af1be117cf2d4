import os

import pytest

# Surface tests build real frames; keep them off the user's screen.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required") is None:
        return
    if not os.getenv("PYQT_TESTS"):
        pytest.skip("statusbar surface tests need PYQT_TESTS=1")
