import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """The CLI replaces loguru sinks; put back one that follows the captured stderr."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="DEBUG")


@pytest.fixture
def write_receipt(tmp_path):
    """Write a receipt file under tmp_path and return its path."""
    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write
