import logging

import pytest


class FakeNode:
    """Stands in for a host scene node."""

    def __init__(self):
        self.children = []

    def add_child(self, child):
        self.children.append(child)
        return child


@pytest.fixture
def node():
    return FakeNode()


@pytest.fixture
def unit_square():
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def reset_portalmask_logger():
    yield
    logger = logging.getLogger("portalmask")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
