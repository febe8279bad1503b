from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Import the local src tree (not an installed copy) and the shared fakes module.
TESTS = Path(__file__).resolve().parent
SRC = TESTS.parent / "src"
sys.path.insert(0, str(SRC))
sys.path.insert(0, str(TESTS))


@pytest.fixture(autouse=True)
def _reset_s3t_logger():
    # The CLI callback reconfigures the package logger on every invocation.
    yield
    logger = logging.getLogger("s3t")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
