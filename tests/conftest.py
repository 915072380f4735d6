import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """The CLI reconfigures the ``spi_search`` logger; undo it after each test."""
    pkg_logger = logging.getLogger("spi_search")
    handlers = pkg_logger.handlers[:]
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield
    for h in pkg_logger.handlers[:]:
        if h not in handlers:
            pkg_logger.removeHandler(h)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
