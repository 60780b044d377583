import logging

import pytest


@pytest.fixture(autouse=True)
def drop_file_handlers():
    """Close log files opened during a test so the next test starts clean."""
    yield
    root = logging.getLogger("rdfsite")
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            root.removeHandler(h)
            h.close()
