"""Global pytest configuration.

Resets the powerset logging setup around each test so level changes made by
one test (for example ``--verbose`` via the CLI) do not leak into the next.
"""

from __future__ import annotations

import pytest

from powerset.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
    setup_root_logger()
