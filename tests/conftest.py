import logging
import os

import pytest

for _name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_UTC"):
    os.environ.pop(_name, None)

from envx import EnvSet
from envx.utils import JsonFormatter, PlainFormatter


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    prev = root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            if isinstance(h.formatter, (JsonFormatter, PlainFormatter)):
                root.removeHandler(h)
        root.setLevel(prev)


@pytest.fixture
def envs():
    return EnvSet("pfx")
