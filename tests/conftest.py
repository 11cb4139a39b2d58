import pytest

from connectfour.debug import DebugLevel, debug


@pytest.fixture(autouse=True)
def quiet_debug():
    """Keep logging settings from leaking between tests."""
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
